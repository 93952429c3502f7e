from dataclasses import dataclass

from sqlalchemy.engine import Engine

from catalogue.config.loader import CatalogueSettings
from catalogue.database.query_builder import QueryBuilderFactory
from catalogue.services.authorization import Authorization, StaticAuthorization
from catalogue.services.category import CategoryService
from catalogue.services.manufacturer import ManufacturerService
from catalogue.services.product import ProductService
from catalogue.services.repository import Repository
from catalogue.services.review import ReviewService
from catalogue.storage.base import ModelFactory


@dataclass(frozen=True)
class CatalogueServices:
    repository: Repository
    categories: CategoryService
    manufacturers: ManufacturerService
    products: ProductService
    reviews: ReviewService


def create_services(
    engine: Engine,
    settings: CatalogueSettings,
    authorization: Authorization | None = None,
) -> CatalogueServices:
    """
    Wire the repository and domain services for one caller.

    Args:
        engine: SQLAlchemy engine for the catalogue database
        settings: Catalogue settings (moderation, stock rules)
        authorization: Caller's permissions; defaults to the configured grants
    """
    if authorization is None:
        authorization = StaticAuthorization(settings.granted_permissions)

    query_builder_factory = QueryBuilderFactory(engine)
    repository = Repository(query_builder_factory, ModelFactory(query_builder_factory, settings))
    products = ProductService(repository, authorization)
    return CatalogueServices(
        repository=repository,
        categories=CategoryService(repository, authorization),
        manufacturers=ManufacturerService(repository, authorization),
        products=products,
        reviews=ReviewService(repository, authorization, products),
    )
