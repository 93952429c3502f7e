from typing import FrozenSet, Iterable, Protocol, runtime_checkable

VIEW_INACTIVE_CATEGORY = "VIEW_INACTIVE_CATEGORY"
VIEW_INACTIVE_MANUFACTURER = "VIEW_INACTIVE_MANUFACTURER"
VIEW_INACTIVE_PRODUCT = "VIEW_INACTIVE_PRODUCT"
VIEW_INACTIVE_REVIEW = "VIEW_INACTIVE_REVIEW"


@runtime_checkable
class Authorization(Protocol):
    def is_allowed(self, permission: str) -> bool:
        ...


class StaticAuthorization:
    """Grants a fixed set of permissions (e.g. from configuration)."""

    def __init__(self, granted: Iterable[str] = ()):
        self._granted: FrozenSet[str] = frozenset(granted)

    def is_allowed(self, permission: str) -> bool:
        return permission in self._granted
