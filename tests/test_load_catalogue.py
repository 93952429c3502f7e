"""Tests for the YAML catalogue fixture loader."""

from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from catalogue.config.loader import CatalogueSettings
from catalogue.database.schema import Base, Manufacturer, Product, Review
from catalogue.runners.load_catalogue import load_catalogue, main, read_catalogue_file

CATALOGUE_FIXTURE = Path(__file__).parent / "fixtures" / "catalogue.yaml"


def _write(tmp_path, text):
    path = tmp_path / "catalogue.yaml"
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def session():
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    engine.dispose()


def test_read_catalogue_file_fixture():
    data = read_catalogue_file(CATALOGUE_FIXTURE)

    assert set(data) == {"categories", "manufacturers", "products", "users", "reviews"}
    assert [row["id"] for row in data["users"]] == ["user-marc"]


def test_read_catalogue_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_catalogue_file(tmp_path / "absent.yaml")


@pytest.mark.parametrize(
    "text,message",
    [
        ("- a\n- b\n", "dictionary of tables"),
        ("wishlists: []\n", "unknown tables: wishlists"),
        ("users: {id: u1}\n", "must be a list"),
        ("users:\n  - first_name: Marc\n", "with an 'id'"),
    ],
)
def test_read_catalogue_file_rejects_invalid_structure(tmp_path, text, message):
    with pytest.raises(ValueError, match=message):
        read_catalogue_file(_write(tmp_path, text))


def test_load_catalogue_counts_and_normalizes(session):
    counts = load_catalogue(read_catalogue_file(CATALOGUE_FIXTURE), session)

    assert counts == {"categories": 5, "manufacturers": 3, "products": 6, "users": 1, "reviews": 5}
    # Unquoted YAML timestamps are stored in the table format
    assert session.get(Manufacturer, "man-naish").timestamp == "2020-06-01 12:30:00"
    assert session.get(Product, "prod-active").delivery_date == "0000-00-00"
    assert session.get(Review, "rev-active").active == 1


def test_load_catalogue_upserts_by_primary_key(session, tmp_path):
    load_catalogue(read_catalogue_file(CATALOGUE_FIXTURE), session)
    update = _write(tmp_path, "products:\n  - id: prod-active\n    title: Renamed\n")

    load_catalogue(read_catalogue_file(update), session)

    assert session.get(Product, "prod-active").title == "Renamed"
    assert session.query(Product).count() == 6


def test_load_catalogue_rejects_unknown_columns(session, tmp_path):
    data = read_catalogue_file(_write(tmp_path, "users:\n  - id: u1\n    nickname: m\n"))

    with pytest.raises(ValueError, match="nickname"):
        load_catalogue(data, session)


def test_main_loads_into_configured_database(tmp_path):
    settings = CatalogueSettings(sqlite_path=str(tmp_path / "catalogue.db"))

    counts = main(CATALOGUE_FIXTURE, settings)

    assert counts["products"] == 6
    engine = create_engine(f"sqlite:///{settings.sqlite_path}")
    with Session(engine) as session:
        assert session.get(Product, "prod-low").stock == 3
    engine.dispose()
