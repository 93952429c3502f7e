from datetime import datetime
from typing import Optional, Type

from catalogue.datatypes.base import DataType
from catalogue.storage.models import ManufacturerModel
from catalogue.utils.time import parse_db_timestamp


class Manufacturer(DataType):
    id: str
    active: bool
    icon: str = ""
    title: str
    short_description: str = ""
    url: str = ""
    timestamp: Optional[datetime] = None

    @classmethod
    def storage_model_class(cls) -> Type[ManufacturerModel]:
        return ManufacturerModel

    @classmethod
    def from_storage_model(cls, model: ManufacturerModel) -> "Manufacturer":
        return cls(
            id=model.id,
            active=model.is_active(),
            icon=model.field("icon") or "",
            title=model.field("title") or "",
            short_description=model.field("short_description") or "",
            url=model.field("url") or "",
            timestamp=parse_db_timestamp(model.field("timestamp")),
        )

    def is_active(self) -> bool:
        return self.active
