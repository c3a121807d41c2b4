"""linguacore - runtime translation catalogs for interactive applications."""

__version__ = "0.1.0"
