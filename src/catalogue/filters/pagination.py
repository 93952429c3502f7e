from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from catalogue.database.query_builder import QueryBuilder


class PaginationFilter(BaseModel):
    """Offset/limit window applied after all conditions. ``limit=None`` means unbounded."""

    model_config = ConfigDict(frozen=True)

    offset: int = Field(default=0, ge=0)
    limit: Optional[int] = Field(default=None, ge=0)

    def add_pagination_to_query(self, builder: QueryBuilder) -> None:
        builder.set_first_result(self.offset)
        builder.set_max_results(self.limit)
