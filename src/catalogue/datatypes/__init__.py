"""Typed catalogue results."""

from .base import DataType
from .category import Category
from .manufacturer import Manufacturer
from .product import Product, ProductStock
from .review import Review, Reviewer

__all__ = [
    "Category",
    "DataType",
    "Manufacturer",
    "Product",
    "ProductStock",
    "Review",
    "Reviewer",
]
