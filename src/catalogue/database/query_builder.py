"""Small SQL query builder over SQLAlchemy Core.

Filters and storage models talk to this builder instead of SQLAlchemy directly.
Every literal goes through ``create_named_parameter`` and is bound at execution;
identifiers passed to ``column`` are always quoted by the dialect.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import literal_column, select, table, text
from sqlalchemy.engine import Engine
from sqlalchemy.sql import Select

from catalogue.utils.logging import get_logger

logger = get_logger(__name__)

PARAMETER_PREFIX = "filter_"


class QueryBuilder:
    """Accumulates a single-table select: columns, source, conditions, order, paging."""

    def __init__(self, engine: Engine):
        self._engine = engine
        self._columns: List[str] = ["*"]
        self._from: Optional[str] = None
        self._order_by: List[str] = []
        self._conditions: List[str] = []
        self._parameters: Dict[str, Any] = {}
        self._first_result = 0
        self._max_results: Optional[int] = None

    def select(self, *columns: str) -> "QueryBuilder":
        self._columns = list(columns) or ["*"]
        return self

    def from_(self, view_name: str) -> "QueryBuilder":
        self._from = view_name
        return self

    def order_by(self, expression: str) -> "QueryBuilder":
        """Replace the ORDER BY list with a single trusted expression."""
        self._order_by = [expression]
        return self

    def and_where(self, fragment: str, parameters: Optional[Dict[str, Any]] = None) -> "QueryBuilder":
        """
        AND a condition onto the WHERE clause.

        Args:
            fragment: SQL fragment using ``:name`` placeholders for every literal
            parameters: Values for placeholders not created via create_named_parameter
        """
        self._conditions.append(fragment)
        if parameters:
            self._parameters.update(parameters)
        return self

    def create_named_parameter(self, value: Any) -> str:
        """Register a bound value and return its placeholder (e.g. ':filter_3')."""
        name = f"{PARAMETER_PREFIX}{len(self._parameters) + 1}"
        while name in self._parameters:
            name = f"{name}_"
        self._parameters[name] = value
        return f":{name}"

    def quote(self, identifier: str) -> str:
        return self._engine.dialect.identifier_preparer.quote_identifier(identifier)

    def column(self, field: str) -> str:
        """Quoted column reference qualified with the current source."""
        if self._from is None:
            return self.quote(field)
        return f"{self.quote(self._from)}.{self.quote(field)}"

    def set_first_result(self, offset: int) -> "QueryBuilder":
        self._first_result = offset
        return self

    def set_max_results(self, limit: Optional[int]) -> "QueryBuilder":
        self._max_results = limit
        return self

    @property
    def conditions(self) -> List[str]:
        return list(self._conditions)

    @property
    def parameters(self) -> Dict[str, Any]:
        return dict(self._parameters)

    @property
    def first_result(self) -> int:
        return self._first_result

    @property
    def max_results(self) -> Optional[int]:
        return self._max_results

    def statement(self) -> Select:
        if self._from is None:
            raise ValueError("Query has no source; call from_() first")

        stmt = select(*[literal_column(col) for col in self._columns]).select_from(table(self._from))
        for condition in self._conditions:
            stmt = stmt.where(text(condition))
        for expression in self._order_by:
            stmt = stmt.order_by(literal_column(expression))
        if self._max_results is not None:
            stmt = stmt.limit(self._max_results)
        if self._first_result:
            stmt = stmt.offset(self._first_result)
        return stmt

    def get_sql(self) -> str:
        return str(self.statement().compile(self._engine))

    def execute(self) -> List[Dict[str, Any]]:
        """
        Run the query and fetch rows as field maps.

        The connection is held only for this call. Driver and SQL errors propagate.

        Returns:
            List of dicts, one per row, in ORDER BY order
        """
        stmt = self.statement()
        with self._engine.connect() as conn:
            result = conn.execute(stmt, self._parameters or None)
            rows = [dict(row) for row in result.mappings()]
        logger.debug(f"Query on {self._from} returned {len(rows)} rows")
        return rows


class QueryBuilderFactory:
    """Creates fresh builders bound to one engine."""

    def __init__(self, engine: Engine):
        self._engine = engine

    def create(self) -> QueryBuilder:
        return QueryBuilder(self._engine)
