"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from catalogue.config.loader import CatalogueSettings, ReviewSettings, StockSettings
from catalogue.database.query_builder import QueryBuilderFactory
from catalogue.database.schema import Base
from catalogue.runners.load_catalogue import load_catalogue, read_catalogue_file
from catalogue.services.authorization import StaticAuthorization
from catalogue.services.factory import create_services
from catalogue.services.repository import Repository
from catalogue.storage.base import ModelFactory

FIXTURES_DIR = Path(__file__).parent / "fixtures"
CATALOGUE_FIXTURE = FIXTURES_DIR / "catalogue.yaml"


@pytest.fixture
def engine():
    """In-memory SQLite database seeded with the catalogue fixture."""
    # StaticPool: every connection sees the same in-memory database
    engine = create_engine(
        "sqlite://",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(engine)

    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    try:
        load_catalogue(read_catalogue_file(CATALOGUE_FIXTURE), session)
    finally:
        session.close()

    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def settings():
    return CatalogueSettings()


@pytest.fixture
def repository(engine, settings):
    query_builder_factory = QueryBuilderFactory(engine)
    return Repository(query_builder_factory, ModelFactory(query_builder_factory, settings))


@pytest.fixture
def services_for(engine):
    """Build services for a caller holding the given permissions."""

    def _build(granted=(), moderate=True, use_stock=True):
        settings = CatalogueSettings(
            reviews=ReviewSettings(moderate=moderate),
            stock=StockSettings(use_stock=use_stock),
        )
        return create_services(engine, settings, StaticAuthorization(granted))

    return _build
