from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, List

import yaml
from sqlalchemy.orm import Session

from catalogue.config.loader import CatalogueSettings
from catalogue.database.schema import Category, Manufacturer, Product, Review, User
from catalogue.database.sqlite_client import session_context
from catalogue.utils.logging import get_logger
from catalogue.utils.time import to_db_timestamp

logger = get_logger(__name__)

# Insertion order; reviews reference users and products
TABLES = {
    "categories": Category,
    "manufacturers": Manufacturer,
    "products": Product,
    "users": User,
    "reviews": Review,
}


def read_catalogue_file(path: Path) -> Dict[str, List[Dict[str, Any]]]:
    """
    Read a catalogue fixture (YAML mapping of table name -> list of rows).

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the structure is invalid or names an unknown table
    """
    if not path.exists():
        raise FileNotFoundError(f"Catalogue file not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError("Catalogue file must be a dictionary of tables")
    unknown = sorted(set(data) - set(TABLES))
    if unknown:
        raise ValueError(f"Catalogue file has unknown tables: {', '.join(unknown)}")
    for table_name, rows in data.items():
        if not isinstance(rows, list):
            raise ValueError(f"Table '{table_name}' must be a list")
        for row in rows:
            if not isinstance(row, dict) or "id" not in row:
                raise ValueError(f"Every row in '{table_name}' must be a dictionary with an 'id'")
    return data


def _normalize_row(row: Dict[str, Any]) -> Dict[str, Any]:
    """YAML parses unquoted timestamps; store them in the table format."""
    normalized = {}
    for key, value in row.items():
        if isinstance(value, datetime):
            value = to_db_timestamp(value)
        elif isinstance(value, date):
            value = value.isoformat()
        elif isinstance(value, bool):
            value = int(value)
        normalized[key] = value
    return normalized


def load_catalogue(data: Dict[str, List[Dict[str, Any]]], session: Session) -> Dict[str, int]:
    """
    Upsert fixture rows by primary key and commit.

    Returns:
        Row count per table
    """
    counts: Dict[str, int] = {}
    for table_name, model in TABLES.items():
        rows = data.get(table_name) or []
        columns = set(model.__table__.columns.keys())
        for row in rows:
            extra = set(row) - columns
            if extra:
                raise ValueError(f"Unknown columns for '{table_name}': {', '.join(sorted(extra))}")
            session.merge(model(**_normalize_row(row)))
        counts[table_name] = len(rows)
    session.commit()
    return counts


def main(path: Path, settings: CatalogueSettings) -> Dict[str, int]:
    """Load a catalogue fixture into the configured SQLite database."""
    data = read_catalogue_file(path)

    with session_context(settings.sqlite_path) as session:
        counts = load_catalogue(data, session)

    logger.info(f"Catalogue data loaded into {settings.sqlite_path}: {counts}")
    return counts
