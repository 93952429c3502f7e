"""Storage models for the catalogue tables."""

from datetime import date
from typing import Optional

from catalogue.storage.base import StorageModel
from catalogue.utils.time import parse_db_date, utc_now_db

STOCK_FLAG_OFFLINE_WHEN_SOLD_OUT = 2

STOCK_STATUS_DELIVERABLE = 0
STOCK_STATUS_LOW = 1
STOCK_STATUS_SOLD_OUT = -1


class CategoryModel(StorageModel):
    view_name = "categories"

    def sql_active_snippet(self) -> str:
        return f"{self.view_name}.active = 1"


class ManufacturerModel(StorageModel):
    view_name = "manufacturers"

    def sql_active_snippet(self) -> str:
        return f"{self.view_name}.active = 1"


class ProductModel(StorageModel):
    view_name = "products"

    def sql_active_snippet(self) -> str:
        view = self.view_name
        snippet = (
            f"({view}.active = 1 OR "
            f"({view}.active_from < CURRENT_TIMESTAMP AND {view}.active_to > CURRENT_TIMESTAMP))"
        )
        if self.settings.stock.use_stock:
            snippet += (
                f" AND ({view}.stock_flag != {STOCK_FLAG_OFFLINE_WHEN_SOLD_OUT} OR {view}.stock > 0)"
            )
        return f"({snippet})"

    def is_active(self) -> bool:
        # Must agree with sql_active_snippet
        now = utc_now_db()
        active = bool(self.field("active", 0)) or (
            (self.field("active_from") or "") < now < (self.field("active_to") or "")
        )
        if not active:
            return False
        if self.settings.stock.use_stock and self.field("stock_flag") == STOCK_FLAG_OFFLINE_WHEN_SOLD_OUT:
            return (self.field("stock") or 0) > 0
        return True

    def can_view(self) -> bool:
        return not self.field("hidden", 0)

    def get_stock(self) -> float:
        return float(self.field("stock") or 0)

    def stock_status(self) -> int:
        """
        Stock traffic light.

        0 -> deliverable, 1 -> deliverable but only a few left, -1 -> no stock
        """
        if not self.settings.stock.use_stock:
            return STOCK_STATUS_DELIVERABLE
        stock = self.get_stock()
        if stock <= 0:
            return STOCK_STATUS_SOLD_OUT
        if stock <= self.settings.stock.low_stock_threshold:
            return STOCK_STATUS_LOW
        return STOCK_STATUS_DELIVERABLE

    def restock_date(self) -> Optional[date]:
        return parse_db_date(self.field("delivery_date"))


class UserModel(StorageModel):
    view_name = "users"

    def is_active(self) -> bool:
        return True


class ReviewModel(StorageModel):
    view_name = "reviews"

    def sql_active_snippet(self) -> str:
        if not self.settings.reviews.moderate:
            return ""
        return f"{self.view_name}.active = 1"

    def is_active(self) -> bool:
        if not self.settings.reviews.moderate:
            return True
        return bool(self.field("active", 0))
