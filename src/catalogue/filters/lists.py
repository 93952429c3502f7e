"""Filter lists: the named filters a list query accepts, plus the active toggle.

Filter lists are immutable. ``filters()`` maps column name to primitive in the
order conditions are applied; unset entries are None and get skipped.
"""

from abc import abstractmethod
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict

from catalogue.datatypes.review import PRODUCT_OBJECT_TYPE

from .primitives import BoolFilter, FilterInterface, FloatFilter, IDFilter, IntegerFilter, StringFilter


class FilterList(BaseModel):
    model_config = ConfigDict(frozen=True)

    active: Optional[BoolFilter] = None

    @abstractmethod
    def filters(self) -> Dict[str, Optional[FilterInterface]]:
        """Column name -> filter, in application order."""

    def get_active(self) -> Optional[BoolFilter]:
        return self.active

    def with_active_filter(self, active: Optional[BoolFilter]) -> "FilterList":
        """Copy of this list with the active filter replaced."""
        return self.model_copy(update={"active": active})


class CategoryFilterList(FilterList):
    title: Optional[StringFilter] = None
    parent_id: Optional[IDFilter] = None
    root_id: Optional[IDFilter] = None

    def filters(self) -> Dict[str, Optional[FilterInterface]]:
        return {
            "title": self.title,
            "parent_id": self.parent_id,
            "root_id": self.root_id,
        }


class ManufacturerFilterList(FilterList):
    title: Optional[StringFilter] = None

    def filters(self) -> Dict[str, Optional[FilterInterface]]:
        return {"title": self.title}


class ProductFilterList(FilterList):
    title: Optional[StringFilter] = None
    category: Optional[IDFilter] = None
    manufacturer: Optional[IDFilter] = None
    price: Optional[FloatFilter] = None

    def filters(self) -> Dict[str, Optional[FilterInterface]]:
        return {
            "title": self.title,
            "category_id": self.category,
            "manufacturer_id": self.manufacturer,
            "price": self.price,
        }


class ReviewFilterList(FilterList):
    product: Optional[IDFilter] = None
    user: Optional[IDFilter] = None
    rating: Optional[IntegerFilter] = None

    def filters(self) -> Dict[str, Optional[FilterInterface]]:
        # object_id alone can also name a non-product object
        object_type = IDFilter(equals=PRODUCT_OBJECT_TYPE) if self.product is not None else None
        return {
            "object_type": object_type,
            "object_id": self.product,
            "user_id": self.user,
            "rating": self.rating,
        }
