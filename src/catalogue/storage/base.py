"""Storage model contract.

A storage model knows where its rows live (``view_name``), how to read one row
by primary key, and which SQL predicate marks its rows as active. It carries no
query orchestration: that belongs to the Repository.
"""

from typing import Any, ClassVar, Dict, Mapping, Optional, Type, TypeVar

from catalogue.config.loader import CatalogueSettings
from catalogue.database.query_builder import QueryBuilderFactory
from catalogue.exceptions import TypeMismatch

M = TypeVar("M", bound="StorageModel")


class StorageModel:
    view_name: ClassVar[str] = ""
    primary_key: ClassVar[str] = "id"

    def __init__(self, query_builder_factory: QueryBuilderFactory, settings: CatalogueSettings):
        self._query_builder_factory = query_builder_factory
        self._settings = settings
        self._fields: Dict[str, Any] = {}

    @property
    def settings(self) -> CatalogueSettings:
        return self._settings

    @property
    def id(self) -> Optional[str]:
        return self._fields.get(self.primary_key)

    def load(self, id: str) -> bool:
        """
        Read one row by primary key and assign it.

        Returns:
            True if a row was found, False otherwise (fields stay untouched)
        """
        builder = self._query_builder_factory.create()
        builder.select("*").from_(self.view_name)
        placeholder = builder.create_named_parameter(id)
        builder.and_where(f"{builder.column(self.primary_key)} = {placeholder}")
        builder.set_max_results(1)

        rows = builder.execute()
        if not rows:
            return False
        self.assign(rows[0])
        return True

    def assign(self, row: Mapping[str, Any]) -> None:
        """Replace the model state with a row's field values."""
        self._fields = dict(row)

    def field(self, name: str, default: Any = None) -> Any:
        return self._fields.get(name, default)

    def fields(self) -> Dict[str, Any]:
        return dict(self._fields)

    def can_view(self) -> bool:
        """Visibility gate for point lookups, independent of active state."""
        return True

    def sql_active_snippet(self) -> str:
        """SQL predicate selecting active rows; empty when the model has no notion of active."""
        return ""

    def is_active(self) -> bool:
        return bool(self.field("active", 0))


class ModelFactory:
    """Instantiates storage models bound to the shared query builder factory and settings."""

    def __init__(self, query_builder_factory: QueryBuilderFactory, settings: CatalogueSettings):
        self._query_builder_factory = query_builder_factory
        self._settings = settings

    def create(self, model_class: Type[M]) -> M:
        if not (isinstance(model_class, type) and issubclass(model_class, StorageModel)):
            raise TypeMismatch(f"{model_class!r} is not a storage model")
        if not model_class.view_name:
            raise TypeMismatch(f"{model_class.__name__} does not declare a view_name")
        return model_class(self._query_builder_factory, self._settings)

    def from_row(self, model_class: Type[M], row: Mapping[str, Any]) -> M:
        model = self.create(model_class)
        model.assign(row)
        return model
