"""Filter primitives: typed predicates over one column.

Each primitive adds at most one (possibly compound) condition to a QueryBuilder.
Values are always bound parameters; the column name is quoted by the builder.
A primitive without a constraint adds nothing.
"""

from abc import abstractmethod
from datetime import datetime
from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from catalogue.database.query_builder import QueryBuilder
from catalogue.utils.time import as_utc, to_db_timestamp

LIKE_ESCAPE = "\\"


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so the operand matches literally."""
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def _and_all(builder: QueryBuilder, parts: List[str]) -> None:
    if not parts:
        return
    if len(parts) == 1:
        builder.and_where(parts[0])
    else:
        builder.and_where("(" + " AND ".join(parts) + ")")


class FilterInterface(BaseModel):
    model_config = ConfigDict(frozen=True)

    @abstractmethod
    def add_to_query(self, builder: QueryBuilder, field: str) -> None:
        """AND this filter's condition for ``field`` onto the builder."""


class BoolFilter(FilterInterface):
    """Tri-state boolean: True, False, or None for "no constraint"."""

    equals: Optional[bool] = None

    def add_to_query(self, builder: QueryBuilder, field: str) -> None:
        if self.equals is None:
            return
        placeholder = builder.create_named_parameter(1 if self.equals else 0)
        builder.and_where(f"{builder.column(field)} = {placeholder}")


class IDFilter(FilterInterface):
    equals: str

    def add_to_query(self, builder: QueryBuilder, field: str) -> None:
        placeholder = builder.create_named_parameter(self.equals)
        builder.and_where(f"{builder.column(field)} = {placeholder}")


class StringFilter(FilterInterface):
    equals: Optional[str] = None
    contains: Optional[str] = None
    begins_with: Optional[str] = None

    @model_validator(mode="after")
    def _require_operand(self) -> "StringFilter":
        if self.equals is None and self.contains is None and self.begins_with is None:
            raise ValueError("StringFilter needs at least one of equals, contains, begins_with")
        return self

    def add_to_query(self, builder: QueryBuilder, field: str) -> None:
        column = builder.column(field)
        parts = []
        if self.equals is not None:
            parts.append(f"{column} = {builder.create_named_parameter(self.equals)}")
        if self.contains is not None:
            placeholder = builder.create_named_parameter(f"%{escape_like(self.contains)}%")
            parts.append(f"{column} LIKE {placeholder} ESCAPE '{LIKE_ESCAPE}'")
        if self.begins_with is not None:
            placeholder = builder.create_named_parameter(f"{escape_like(self.begins_with)}%")
            parts.append(f"{column} LIKE {placeholder} ESCAPE '{LIKE_ESCAPE}'")
        _and_all(builder, parts)


def _range_parts(
    builder: QueryBuilder,
    column: str,
    equals: Optional[Union[int, float, str]],
    less_than: Optional[Union[int, float, str]],
    greater_than: Optional[Union[int, float, str]],
    between: Optional[Tuple[Union[int, float, str], Union[int, float, str]]],
) -> List[str]:
    parts = []
    if equals is not None:
        parts.append(f"{column} = {builder.create_named_parameter(equals)}")
    if less_than is not None:
        parts.append(f"{column} < {builder.create_named_parameter(less_than)}")
    if greater_than is not None:
        parts.append(f"{column} > {builder.create_named_parameter(greater_than)}")
    if between is not None:
        low = builder.create_named_parameter(between[0])
        high = builder.create_named_parameter(between[1])
        parts.append(f"{column} BETWEEN {low} AND {high}")
    return parts


def _check_range(model, name: str):
    operands = (model.equals, getattr(model, "less_than", None), getattr(model, "greater_than", None), model.between)
    if all(operand is None for operand in operands):
        raise ValueError(f"{name} needs at least one of equals, less_than, greater_than, between")
    if model.between is not None and model.between[0] > model.between[1]:
        raise ValueError(f"{name} between: lower bound {model.between[0]} exceeds upper bound {model.between[1]}")
    return model


class IntegerFilter(FilterInterface):
    equals: Optional[int] = None
    less_than: Optional[int] = None
    greater_than: Optional[int] = None
    between: Optional[Tuple[int, int]] = None

    @model_validator(mode="after")
    def _validate(self) -> "IntegerFilter":
        return _check_range(self, "IntegerFilter")

    def add_to_query(self, builder: QueryBuilder, field: str) -> None:
        parts = _range_parts(
            builder, builder.column(field), self.equals, self.less_than, self.greater_than, self.between
        )
        _and_all(builder, parts)


class FloatFilter(FilterInterface):
    equals: Optional[float] = None
    less_than: Optional[float] = None
    greater_than: Optional[float] = None
    between: Optional[Tuple[float, float]] = None

    @model_validator(mode="after")
    def _validate(self) -> "FloatFilter":
        return _check_range(self, "FloatFilter")

    def add_to_query(self, builder: QueryBuilder, field: str) -> None:
        parts = _range_parts(
            builder, builder.column(field), self.equals, self.less_than, self.greater_than, self.between
        )
        _and_all(builder, parts)


class DateFilter(FilterInterface):
    equals: Optional[datetime] = None
    between: Optional[Tuple[datetime, datetime]] = None

    @field_validator("equals")
    @classmethod
    def _equals_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value) if value is not None else None

    @field_validator("between")
    @classmethod
    def _between_utc(cls, value: Optional[Tuple[datetime, datetime]]) -> Optional[Tuple[datetime, datetime]]:
        # Mixed naive and aware bounds must compare
        return (as_utc(value[0]), as_utc(value[1])) if value is not None else None

    @model_validator(mode="after")
    def _validate(self) -> "DateFilter":
        return _check_range(self, "DateFilter")

    def add_to_query(self, builder: QueryBuilder, field: str) -> None:
        equals = to_db_timestamp(self.equals) if self.equals is not None else None
        between = None
        if self.between is not None:
            between = (to_db_timestamp(self.between[0]), to_db_timestamp(self.between[1]))
        _and_all(builder, _range_parts(builder, builder.column(field), equals, None, None, between))
