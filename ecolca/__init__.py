"""EcoLCA: product life-cycle impact dashboard."""

__version__ = "1.0.0"
