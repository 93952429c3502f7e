"""Composable, immutable query filters."""

from .lists import (
    CategoryFilterList,
    FilterList,
    ManufacturerFilterList,
    ProductFilterList,
    ReviewFilterList,
)
from .pagination import PaginationFilter
from .primitives import (
    BoolFilter,
    DateFilter,
    FilterInterface,
    FloatFilter,
    IDFilter,
    IntegerFilter,
    StringFilter,
)

__all__ = [
    "BoolFilter",
    "CategoryFilterList",
    "DateFilter",
    "FilterInterface",
    "FilterList",
    "FloatFilter",
    "IDFilter",
    "IntegerFilter",
    "ManufacturerFilterList",
    "PaginationFilter",
    "ProductFilterList",
    "ReviewFilterList",
    "StringFilter",
]
