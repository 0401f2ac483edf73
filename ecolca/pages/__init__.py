"""Pages module for different application views."""

from .builder_page import BuilderPage
from .results_page import ResultsPage
from .products_page import ProductsPage
from .user_guide_page import UserGuidePage
