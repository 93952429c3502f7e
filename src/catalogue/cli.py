"""CLI entrypoint for the catalogue query layer."""

import argparse
import json
import sys
from pathlib import Path
from typing import Iterable, List, Optional

from catalogue.config.loader import CatalogueSettings, load_settings
from catalogue.database.sqlite_client import get_engine
from catalogue.datatypes.base import DataType
from catalogue.exceptions import NotFound, Unauthorized
from catalogue.filters import (
    CategoryFilterList,
    IDFilter,
    ManufacturerFilterList,
    PaginationFilter,
    ProductFilterList,
    ReviewFilterList,
    StringFilter,
)
from catalogue.runners.load_catalogue import main as load_catalogue_main
from catalogue.services.factory import CatalogueServices, create_services
from catalogue.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)

EXIT_UNAUTHORIZED = 3
EXIT_NOT_FOUND = 4


def _print_json(payload) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def _dump(item: Optional[DataType]):
    return item.model_dump(mode="json") if item is not None else None


def _dump_all(items: Iterable[DataType]) -> List[dict]:
    return [_dump(item) for item in items]


def _services(settings: CatalogueSettings) -> CatalogueServices:
    engine = get_engine(settings.sqlite_path, create_schema=False)
    return create_services(engine, settings)


def _pagination(args: argparse.Namespace) -> Optional[PaginationFilter]:
    if args.offset is None and args.limit is None:
        return None
    return PaginationFilter(offset=args.offset or 0, limit=args.limit)


def _title_filter(args: argparse.Namespace) -> Optional[StringFilter]:
    if args.title_contains is None:
        return None
    return StringFilter(contains=args.title_contains)


def _id_filter(value: Optional[str]) -> Optional[IDFilter]:
    return IDFilter(equals=value) if value is not None else None


def cmd_init_db(args: argparse.Namespace, settings: CatalogueSettings) -> None:
    """Create the catalogue tables."""
    get_engine(settings.sqlite_path)
    print(f"Initialized catalogue database at {settings.sqlite_path}")


def cmd_load(args: argparse.Namespace, settings: CatalogueSettings) -> None:
    """Load a YAML catalogue fixture."""
    get_engine(settings.sqlite_path)
    counts = load_catalogue_main(Path(args.path), settings)
    print(", ".join(f"{count} {table}" for table, count in counts.items()))


def cmd_category(args: argparse.Namespace, settings: CatalogueSettings) -> None:
    _print_json(_dump(_services(settings).categories.category(args.id)))


def cmd_categories(args: argparse.Namespace, settings: CatalogueSettings) -> None:
    filter = CategoryFilterList(title=_title_filter(args), parent_id=_id_filter(args.parent))
    _print_json(_dump_all(_services(settings).categories.categories(filter, _pagination(args))))


def cmd_manufacturer(args: argparse.Namespace, settings: CatalogueSettings) -> None:
    _print_json(_dump(_services(settings).manufacturers.manufacturer(args.id)))


def cmd_manufacturers(args: argparse.Namespace, settings: CatalogueSettings) -> None:
    filter = ManufacturerFilterList(title=_title_filter(args))
    _print_json(_dump_all(_services(settings).manufacturers.manufacturers(filter, _pagination(args))))


def cmd_product(args: argparse.Namespace, settings: CatalogueSettings) -> None:
    _print_json(_dump(_services(settings).products.product(args.id)))


def cmd_products(args: argparse.Namespace, settings: CatalogueSettings) -> None:
    filter = ProductFilterList(
        title=_title_filter(args),
        category=_id_filter(args.category),
        manufacturer=_id_filter(args.manufacturer),
    )
    _print_json(_dump_all(_services(settings).products.products(filter, _pagination(args))))


def cmd_stock(args: argparse.Namespace, settings: CatalogueSettings) -> None:
    _print_json(_dump(_services(settings).products.stock(args.id)))


def cmd_review(args: argparse.Namespace, settings: CatalogueSettings) -> None:
    services = _services(settings)
    review = services.reviews.review(args.id)
    payload = _dump(review)
    payload["user"] = _dump(services.reviews.reviewer(review))
    payload["product"] = _dump(services.reviews.product(review))
    _print_json(payload)


def cmd_reviews(args: argparse.Namespace, settings: CatalogueSettings) -> None:
    filter = ReviewFilterList(product=_id_filter(args.product), user=_id_filter(args.user))
    _print_json(_dump_all(_services(settings).reviews.reviews(filter, _pagination(args))))


def _add_list_arguments(parser: argparse.ArgumentParser, with_title: bool = True) -> None:
    if with_title:
        parser.add_argument(
            "--title-contains",
            type=str,
            help="Only rows whose title contains this text",
        )
    parser.add_argument(
        "--offset",
        type=int,
        help="Number of rows to skip (default: 0)",
    )
    parser.add_argument(
        "--limit",
        type=int,
        help="Maximum number of rows (default: unbounded)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="catalogue",
        description="Query categories, manufacturers, products and reviews",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to catalogue.config.yaml (default: ./catalogue.config.yaml if present)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    init_parser = subparsers.add_parser("init-db", help="Create the catalogue tables")
    init_parser.set_defaults(func=cmd_init_db)

    load_parser = subparsers.add_parser("load", help="Load a YAML catalogue fixture")
    load_parser.add_argument("path", type=str, help="Fixture file")
    load_parser.set_defaults(func=cmd_load)

    category_parser = subparsers.add_parser("category", help="Show one category")
    category_parser.add_argument("id", type=str)
    category_parser.set_defaults(func=cmd_category)

    categories_parser = subparsers.add_parser("categories", help="List categories")
    _add_list_arguments(categories_parser)
    categories_parser.add_argument("--parent", type=str, help="Only children of this category id")
    categories_parser.set_defaults(func=cmd_categories)

    manufacturer_parser = subparsers.add_parser("manufacturer", help="Show one manufacturer")
    manufacturer_parser.add_argument("id", type=str)
    manufacturer_parser.set_defaults(func=cmd_manufacturer)

    manufacturers_parser = subparsers.add_parser("manufacturers", help="List manufacturers")
    _add_list_arguments(manufacturers_parser)
    manufacturers_parser.set_defaults(func=cmd_manufacturers)

    product_parser = subparsers.add_parser("product", help="Show one product")
    product_parser.add_argument("id", type=str)
    product_parser.set_defaults(func=cmd_product)

    products_parser = subparsers.add_parser("products", help="List products")
    _add_list_arguments(products_parser)
    products_parser.add_argument("--category", type=str, help="Only products in this main category")
    products_parser.add_argument("--manufacturer", type=str, help="Only products of this manufacturer")
    products_parser.set_defaults(func=cmd_products)

    stock_parser = subparsers.add_parser("stock", help="Show stock information for one product")
    stock_parser.add_argument("id", type=str)
    stock_parser.set_defaults(func=cmd_stock)

    review_parser = subparsers.add_parser("review", help="Show one review with its user and product")
    review_parser.add_argument("id", type=str)
    review_parser.set_defaults(func=cmd_review)

    reviews_parser = subparsers.add_parser("reviews", help="List reviews")
    _add_list_arguments(reviews_parser, with_title=False)
    reviews_parser.add_argument("--product", type=str, help="Only reviews of this product")
    reviews_parser.add_argument("--user", type=str, help="Only reviews written by this user")
    reviews_parser.set_defaults(func=cmd_reviews)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    settings = load_settings(args.config)
    configure_logging("DEBUG" if args.verbose else settings.log_level)

    try:
        args.func(args, settings)
    except NotFound as e:
        print(f"Not found: {e}", file=sys.stderr)
        return EXIT_NOT_FOUND
    except Unauthorized as e:
        print(f"Unauthorized: {e}", file=sys.stderr)
        return EXIT_UNAUTHORIZED
    except Exception as e:
        logger.error(f"Error running command '{args.command}': {e}", exc_info=True)
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
