"""Console shop with a file-backed product catalog, user accounts, and admin and buyer menus."""

__version__ = "0.1.0"
__all__ = ["__version__"]