from datetime import datetime
from typing import Optional, Type

from catalogue.datatypes.base import DataType
from catalogue.storage.models import CategoryModel
from catalogue.utils.time import parse_db_timestamp


class Category(DataType):
    id: str
    active: bool
    title: str
    short_description: str = ""
    long_description: str = ""
    position: int = 0
    parent_id: Optional[str] = None
    root_id: Optional[str] = None
    external_link: str = ""
    timestamp: Optional[datetime] = None

    @classmethod
    def storage_model_class(cls) -> Type[CategoryModel]:
        return CategoryModel

    @classmethod
    def from_storage_model(cls, model: CategoryModel) -> "Category":
        return cls(
            id=model.id,
            active=model.is_active(),
            title=model.field("title") or "",
            short_description=model.field("short_description") or "",
            long_description=model.field("long_description") or "",
            position=model.field("position") or 0,
            parent_id=model.field("parent_id"),
            root_id=model.field("root_id"),
            external_link=model.field("external_link") or "",
            timestamp=parse_db_timestamp(model.field("timestamp")),
        )

    def is_active(self) -> bool:
        return self.active
