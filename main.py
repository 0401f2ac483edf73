"""
EcoLCA Dashboard entry point.

Streamlit reruns this script on every interaction. Each run configures the
page, makes sure the session owns an ``LCAState`` and a ``ProductStore``,
draws the sidebar and header, then hands off to the selected page.

    streamlit run main.py
"""

import streamlit as st

from ecolca.config import PAGE_CONFIG, setup_logging, initialize_session_state
st.set_page_config(**PAGE_CONFIG)

from ecolca.pages import BuilderPage, ResultsPage, ProductsPage, UserGuidePage
from ecolca.ui import UIStyles, Sidebar, Header
from ecolca.utils.i18n import Translator
from ecolca.utils.product_store import ProductStore

# Translation key and English label → page
ROUTES = [
    ("nav.builder", "Product Builder", BuilderPage),
    ("nav.results", "Results", ResultsPage),
    ("nav.products", "Saved Products", ProductsPage),
    ("nav.user_guide", "User Guide", UserGuidePage),
]


def load_saved_products(logger):
    """Read the product store into the session state once per session."""
    if "product_store" not in st.session_state:
        st.session_state.product_store = ProductStore()
    if st.session_state.get("products_loaded"):
        return
    products = st.session_state.lca_state.load_products(st.session_state.product_store)
    st.session_state.products_loaded = True
    logger.info("Loaded %d saved products", len(products))


def main():
    initialize_session_state()
    logger = setup_logging()
    UIStyles.apply_theme()
    load_saved_products(logger)

    selected = Sidebar().render()
    Header().render()

    pages = {Translator.t(key, label): page for key, label, page in ROUTES}
    page = pages.get(selected)
    if page is None:
        logger.error("Unknown page requested: %s", selected)
        st.error(f"Unknown page: {selected}")
        return

    logger.debug("Rendering page %s", page.__name__)
    page.render()


if __name__ == "__main__":
    main()
