"""Error taxonomy for the catalogue query layer.

NotFound and Unauthorized are distinct kinds and must stay distinct up to the
presentation boundary. TypeMismatch signals a misconfigured data type and is a
programming error, not a user-facing condition.
"""


class CatalogueError(Exception):
    """Base class for catalogue errors."""


class NotFound(CatalogueError, LookupError):
    """An id does not resolve to a visible row."""

    def __init__(self, id: str, message: str | None = None):
        self.id = id
        super().__init__(message or f"Object was not found by id: {id}")

    @classmethod
    def by_id(cls, id: str) -> "NotFound":
        return cls(id)


class CategoryNotFound(NotFound):
    @classmethod
    def by_id(cls, id: str) -> "CategoryNotFound":
        return cls(id, f"Category was not found by id: {id}")


class ManufacturerNotFound(NotFound):
    @classmethod
    def by_id(cls, id: str) -> "ManufacturerNotFound":
        return cls(id, f"Manufacturer was not found by id: {id}")


class ProductNotFound(NotFound):
    @classmethod
    def by_id(cls, id: str) -> "ProductNotFound":
        return cls(id, f"Product was not found by id: {id}")


class ReviewNotFound(NotFound):
    @classmethod
    def by_id(cls, id: str) -> "ReviewNotFound":
        return cls(id, f"Review was not found by id: {id}")


class TypeMismatch(CatalogueError, TypeError):
    """A data type resolves to something that is not a storage model, or builds a non-DataType."""


class Unauthorized(CatalogueError):
    """A visibility-gated read was requested without the required permission."""

    def __init__(self, message: str = "Unauthorized", permission: str | None = None):
        self.permission = permission
        super().__init__(message)
