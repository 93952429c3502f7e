from datetime import datetime
from typing import Optional, Type

from catalogue.datatypes.base import DataType
from catalogue.storage.models import ReviewModel, UserModel
from catalogue.utils.time import parse_db_timestamp

PRODUCT_OBJECT_TYPE = "product"


class Reviewer(DataType):
    """Public view of the user who wrote a review."""

    id: str
    first_name: str = ""
    last_name: str = ""

    @classmethod
    def storage_model_class(cls) -> Type[UserModel]:
        return UserModel

    @classmethod
    def from_storage_model(cls, model: UserModel) -> "Reviewer":
        return cls(
            id=model.id,
            first_name=model.field("first_name") or "",
            last_name=model.field("last_name") or "",
        )


class Review(DataType):
    id: str
    active: bool
    text: str = ""
    rating: int = 0
    created_at: Optional[datetime] = None
    user_id: str
    object_id: str
    object_type: str = PRODUCT_OBJECT_TYPE

    @classmethod
    def storage_model_class(cls) -> Type[ReviewModel]:
        return ReviewModel

    @classmethod
    def from_storage_model(cls, model: ReviewModel) -> "Review":
        return cls(
            id=model.id,
            active=model.is_active(),
            text=model.field("text") or "",
            rating=model.field("rating") or 0,
            created_at=parse_db_timestamp(model.field("created_at")),
            user_id=model.field("user_id") or "",
            object_id=model.field("object_id") or "",
            object_type=model.field("object_type") or PRODUCT_OBJECT_TYPE,
        )

    def is_active(self) -> bool:
        return self.active

    def is_about_product(self) -> bool:
        return self.object_type == PRODUCT_OBJECT_TYPE
