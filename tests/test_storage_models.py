"""Tests for storage models and the model factory."""

import pytest

from catalogue.config.loader import CatalogueSettings, ReviewSettings, StockSettings
from catalogue.database.query_builder import QueryBuilderFactory
from catalogue.exceptions import TypeMismatch
from catalogue.storage import CategoryModel, ModelFactory, ProductModel, ReviewModel, StorageModel, UserModel


class NoViewModel(StorageModel):
    pass


@pytest.fixture
def factory(engine):
    return ModelFactory(QueryBuilderFactory(engine), CatalogueSettings())


def _factory(engine, moderate=True, use_stock=True):
    settings = CatalogueSettings(
        reviews=ReviewSettings(moderate=moderate),
        stock=StockSettings(use_stock=use_stock),
    )
    return ModelFactory(QueryBuilderFactory(engine), settings)


def test_load_assigns_row(factory):
    model = factory.create(CategoryModel)

    assert model.load("cat-kites") is True
    assert model.id == "cat-kites"
    assert model.field("title") == "Kites"
    assert model.is_active() is True


def test_load_missing_leaves_model_empty(factory):
    model = factory.create(CategoryModel)

    assert model.load("DOES-NOT-EXIST") is False
    assert model.id is None
    assert model.fields() == {}


def test_load_binds_id_as_parameter(factory):
    assert factory.create(CategoryModel).load("x' OR '1'='1") is False


@pytest.mark.parametrize("model_class", [dict, "CategoryModel", NoViewModel])
def test_factory_rejects_non_storage_models(factory, model_class):
    with pytest.raises(TypeMismatch):
        factory.create(model_class)


def test_from_row_builds_independent_instances(factory):
    first = factory.from_row(CategoryModel, {"id": "a", "active": 1})
    second = factory.from_row(CategoryModel, {"id": "b", "active": 0})

    assert (first.id, first.is_active()) == ("a", True)
    assert (second.id, second.is_active()) == ("b", False)


def test_category_snippet_targets_view(factory):
    assert factory.create(CategoryModel).sql_active_snippet() == "categories.active = 1"


def test_user_model_has_no_active_notion(factory):
    model = factory.create(UserModel)

    assert model.sql_active_snippet() == ""
    assert model.is_active() is True


def test_product_snippet_with_and_without_stock(engine):
    with_stock = _factory(engine).create(ProductModel).sql_active_snippet()
    without_stock = _factory(engine, use_stock=False).create(ProductModel).sql_active_snippet()

    assert "products.active_from < CURRENT_TIMESTAMP" in with_stock
    assert "products.stock_flag != 2" in with_stock
    assert "stock_flag" not in without_stock


def test_product_can_view_hides_hidden_rows(factory):
    model = factory.create(ProductModel)

    model.load("prod-hidden")
    assert model.can_view() is False
    assert model.is_active() is True

    model.load("prod-active")
    assert model.can_view() is True


@pytest.mark.parametrize(
    "row,expected",
    [
        ({"active": 1}, True),
        ({"active": 0}, False),
        ({"active": 0, "active_from": "2000-01-01 00:00:00", "active_to": "2999-12-31 23:59:59"}, True),
        ({"active": 0, "active_from": "2000-01-01 00:00:00", "active_to": "2001-01-01 00:00:00"}, False),
        ({"active": 1, "stock_flag": 2, "stock": 0}, False),
        ({"active": 1, "stock_flag": 2, "stock": 1}, True),
        ({"active": 1, "stock_flag": 1, "stock": 0}, True),
    ],
)
def test_product_is_active(factory, row, expected):
    assert factory.from_row(ProductModel, {"id": "p", **row}).is_active() is expected


@pytest.mark.parametrize("stock,status", [(15, 0), (5, 1), (1, 1), (0, -1)])
def test_product_stock_status(factory, stock, status):
    assert factory.from_row(ProductModel, {"id": "p", "stock": stock}).stock_status() == status


def test_review_snippet_follows_moderation(engine):
    moderated = _factory(engine).from_row(ReviewModel, {"id": "r", "active": 0})
    unmoderated = _factory(engine, moderate=False).from_row(ReviewModel, {"id": "r", "active": 0})

    assert moderated.sql_active_snippet() == "reviews.active = 1"
    assert moderated.is_active() is False
    assert unmoderated.sql_active_snippet() == ""
    assert unmoderated.is_active() is True
