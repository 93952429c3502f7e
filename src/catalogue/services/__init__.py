"""Repository and domain services."""

from .authorization import Authorization, StaticAuthorization
from .category import CategoryService
from .factory import CatalogueServices, create_services
from .manufacturer import ManufacturerService
from .product import ProductService
from .repository import Repository
from .review import ReviewService

__all__ = [
    "Authorization",
    "CatalogueServices",
    "CategoryService",
    "ManufacturerService",
    "ProductService",
    "Repository",
    "ReviewService",
    "StaticAuthorization",
    "create_services",
]
