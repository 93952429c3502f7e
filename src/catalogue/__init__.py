"""Catalogue query layer: typed read access to categories, manufacturers, products and reviews."""

__version__ = "0.3.0"
