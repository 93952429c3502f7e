"""Shared visibility rules for domain services.

List queries are scoped by rewriting the active filter before the query is
built. Point lookups are scoped after the fetch: an inactive row raises
Unauthorized (not NotFound) when the caller lacks the permission.
"""

from typing import Type, TypeVar

from catalogue.datatypes.base import DataType
from catalogue.exceptions import NotFound, Unauthorized
from catalogue.filters.lists import FilterList
from catalogue.filters.primitives import BoolFilter
from catalogue.services.authorization import Authorization
from catalogue.services.repository import Repository

T = TypeVar("T", bound=DataType)
F = TypeVar("F", bound=FilterList)


class VisibilityScopedService:
    def __init__(self, repository: Repository, authorization: Authorization):
        self._repository = repository
        self._authorization = authorization

    def _get_visible(self, id: str, data_type: Type[T], not_found: Type[NotFound], permission: str) -> T:
        try:
            item = self._repository.get_by_id(id, data_type)
        except NotFound:
            raise not_found.by_id(id) from None

        if item.is_active():
            return item

        if not self._authorization.is_allowed(permission):
            raise Unauthorized("Unauthorized", permission=permission)

        return item

    def _scope_filter(self, filter: F, permission: str) -> F:
        if not self._authorization.is_allowed(permission):
            return filter.with_active_filter(BoolFilter(equals=True))
        return filter
