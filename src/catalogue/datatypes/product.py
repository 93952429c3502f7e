from datetime import date, datetime
from typing import Optional, Type

from catalogue.datatypes.base import DataType
from catalogue.storage.models import ProductModel
from catalogue.utils.time import parse_db_timestamp


class Product(DataType):
    id: str
    active: bool
    sku: str = ""
    title: str
    short_description: str = ""
    price: float = 0.0
    manufacturer_id: Optional[str] = None
    category_id: Optional[str] = None
    timestamp: Optional[datetime] = None

    @classmethod
    def storage_model_class(cls) -> Type[ProductModel]:
        return ProductModel

    @classmethod
    def from_storage_model(cls, model: ProductModel) -> "Product":
        return cls(
            id=model.id,
            active=model.is_active(),
            sku=model.field("sku") or "",
            title=model.field("title") or "",
            short_description=model.field("short_description") or "",
            price=model.field("price") or 0.0,
            manufacturer_id=model.field("manufacturer_id"),
            category_id=model.field("category_id"),
            timestamp=parse_db_timestamp(model.field("timestamp")),
        )

    def is_active(self) -> bool:
        return self.active


class ProductStock(DataType):
    """
    Stock view of a product.

    stock_status is one of:
     0 -> deliverable
     1 -> deliverable, but only a few left
    -1 -> no stock
    """

    product_id: str
    active: bool
    stock: float
    stock_status: int
    restock_date: Optional[date] = None

    @classmethod
    def storage_model_class(cls) -> Type[ProductModel]:
        return ProductModel

    @classmethod
    def from_storage_model(cls, model: ProductModel) -> "ProductStock":
        return cls(
            product_id=model.id,
            active=model.is_active(),
            stock=model.get_stock(),
            stock_status=model.stock_status(),
            restock_date=model.restock_date(),
        )

    def is_active(self) -> bool:
        return self.active
