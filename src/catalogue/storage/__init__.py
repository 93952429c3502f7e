"""Storage models: row access and active/visibility rules per table."""

from .base import ModelFactory, StorageModel
from .models import CategoryModel, ManufacturerModel, ProductModel, ReviewModel, UserModel

__all__ = [
    "CategoryModel",
    "ManufacturerModel",
    "ModelFactory",
    "ProductModel",
    "ReviewModel",
    "StorageModel",
    "UserModel",
]
