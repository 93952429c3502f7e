"""End-to-end tests for the catalogue CLI."""

import json
from pathlib import Path

import pytest

from catalogue.cli import EXIT_NOT_FOUND, EXIT_UNAUTHORIZED, build_parser, main

CATALOGUE_FIXTURE = Path(__file__).parent / "fixtures" / "catalogue.yaml"


@pytest.fixture
def config_path(tmp_path):
    """Config pointing at a database loaded with the catalogue fixture."""
    path = tmp_path / "catalogue.config.yaml"
    path.write_text(
        f"storage:\n  sqlite_path: {tmp_path / 'catalogue.db'}\nlogging:\n  level: WARNING\n",
        encoding="utf-8",
    )
    assert main(["--config", str(path), "init-db"]) == 0
    assert main(["--config", str(path), "load", str(CATALOGUE_FIXTURE)]) == 0
    return path


def _run(config_path, capsys, *argv):
    capsys.readouterr()
    code = main(["--config", str(config_path), *argv])
    return code, capsys.readouterr()


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage:" in capsys.readouterr().out


def test_parser_knows_every_command():
    parser = build_parser()
    for argv in (["category", "x"], ["products", "--category", "c"], ["reviews", "--user", "u"]):
        assert parser.parse_args(argv).func is not None


def test_load_reports_counts(tmp_path, capsys):
    path = tmp_path / "catalogue.config.yaml"
    path.write_text(
        f"storage:\n  sqlite_path: {tmp_path / 'shop.db'}\nlogging:\n  level: WARNING\n",
        encoding="utf-8",
    )

    assert main(["--config", str(path), "load", str(CATALOGUE_FIXTURE)]) == 0
    assert "6 products" in capsys.readouterr().out


def test_category_prints_json(config_path, capsys):
    code, captured = _run(config_path, capsys, "category", "cat-kites")

    assert code == 0
    payload = json.loads(captured.out)
    assert payload["id"] == "cat-kites"
    assert payload["title"] == "Kites"
    assert payload["active"] is True


def test_missing_category_exits_not_found(config_path, capsys):
    code, captured = _run(config_path, capsys, "category", "DOES-NOT-EXIST")

    assert code == EXIT_NOT_FOUND
    assert "Category was not found by id: DOES-NOT-EXIST" in captured.err


def test_inactive_category_exits_unauthorized(config_path, capsys):
    code, captured = _run(config_path, capsys, "category", "cat-inactive")

    assert code == EXIT_UNAUTHORIZED
    assert "Unauthorized" in captured.err


def test_categories_with_pagination(config_path, capsys):
    code, captured = _run(config_path, capsys, "categories", "--parent", "cat-root", "--limit", "1")

    assert code == 0
    assert [item["id"] for item in json.loads(captured.out)] == ["cat-boards"]


def test_products_filtered_by_category(config_path, capsys):
    code, captured = _run(config_path, capsys, "products", "--category", "cat-kites")

    assert code == 0
    assert [item["id"] for item in json.loads(captured.out)] == ["prod-active", "prod-low"]


def test_stock(config_path, capsys):
    code, captured = _run(config_path, capsys, "stock", "prod-low")

    assert code == 0
    assert json.loads(captured.out) == {
        "product_id": "prod-low",
        "active": True,
        "stock": 3.0,
        "stock_status": 1,
        "restock_date": "2030-05-01",
    }


def test_review_includes_user_and_product(config_path, capsys):
    code, captured = _run(config_path, capsys, "review", "rev-active")

    assert code == 0
    payload = json.loads(captured.out)
    assert payload["user"]["last_name"] == "Muster"
    assert payload["product"]["title"] == "Kite NBK EVO 2010"


def test_review_with_missing_user_prints_null(config_path, capsys):
    code, captured = _run(config_path, capsys, "review", "rev-wrong-user")

    assert code == 0
    assert json.loads(captured.out)["user"] is None
