"""Generic read repository: maps data type + filter list + pagination onto one SQL query."""

from typing import List, Optional, Type, TypeVar

from catalogue.database.query_builder import QueryBuilder, QueryBuilderFactory
from catalogue.datatypes.base import DataType
from catalogue.exceptions import NotFound, TypeMismatch
from catalogue.filters.lists import FilterList
from catalogue.filters.pagination import PaginationFilter
from catalogue.storage.base import ModelFactory, StorageModel
from catalogue.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T", bound=DataType)


class Repository:
    """
    Stateless between calls: every call builds its own query and models.

    The repository knows nothing about what a field means; filters render
    themselves and storage models supply their own active predicate.
    """

    def __init__(self, query_builder_factory: QueryBuilderFactory, model_factory: ModelFactory):
        self._query_builder_factory = query_builder_factory
        self._model_factory = model_factory

    def get_by_id(self, id: str, data_type: Type[T]) -> T:
        """
        Load one row by id and build the typed result.

        Args:
            id: Primary key value
            data_type: DataType subclass to build

        Returns:
            Instance of data_type

        Raises:
            TypeMismatch: If data_type is not backed by a storage model or builds a non-DataType
            NotFound: If no row exists or the model's can_view() gate refuses it
        """
        model = self._resolve_model(data_type)
        if not model.load(id) or not model.can_view():
            raise NotFound(id)
        return self._build(data_type, model)

    def get_by_filter(
        self,
        filter: FilterList,
        data_type: Type[T],
        pagination: Optional[PaginationFilter] = None,
    ) -> List[T]:
        """
        Select rows matching a filter list, ordered by primary key.

        Args:
            filter: Filter list; an active filter set to True adds the model's active predicate
            data_type: DataType subclass to build per row
            pagination: Optional offset/limit; None means unbounded

        Returns:
            List of data_type instances (empty when nothing matches)

        Raises:
            TypeMismatch: If data_type is not backed by a storage model or builds a non-DataType
        """
        model = self._resolve_model(data_type)

        builder = self._query_builder_factory.create()
        view_name = model.view_name
        builder.select("*").from_(view_name).order_by(builder.column(model.primary_key))

        self._apply_visibility(builder, model, filter)

        for field, field_filter in filter.filters().items():
            if field_filter is None:
                continue
            field_filter.add_to_query(builder, field)

        if pagination is not None:
            pagination.add_pagination_to_query(builder)

        logger.debug(
            f"Querying {view_name}: {len(builder.conditions)} condition(s), "
            f"offset={builder.first_result}, limit={builder.max_results}"
        )
        rows = builder.execute()

        model_class = type(model)
        return [self._build(data_type, self._model_factory.from_row(model_class, row)) for row in rows]

    @staticmethod
    def _apply_visibility(builder: QueryBuilder, model: StorageModel, filter: FilterList) -> None:
        """AND the model's active predicate when the filter asks for active rows only."""
        active = filter.get_active()
        if active is None or active.equals is not True:
            return
        snippet = model.sql_active_snippet()
        if snippet:
            builder.and_where(snippet)

    def _resolve_model(self, data_type: Type[DataType]) -> StorageModel:
        if not (isinstance(data_type, type) and issubclass(data_type, DataType)):
            raise TypeMismatch(f"{data_type!r} is not a DataType")
        return self._model_factory.create(data_type.storage_model_class())

    @staticmethod
    def _build(data_type: Type[T], model: StorageModel) -> T:
        instance = data_type.from_storage_model(model)
        if not isinstance(instance, DataType):
            raise TypeMismatch(f"{data_type.__name__}.from_storage_model returned {type(instance).__name__}")
        return instance
