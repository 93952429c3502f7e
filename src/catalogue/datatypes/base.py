"""DataType contract: binds a typed result to its storage model and construction rule."""

from abc import abstractmethod
from typing import Type

from pydantic import BaseModel, ConfigDict

from catalogue.storage.base import StorageModel


class DataType(BaseModel):
    """
    Immutable typed result built from one loaded storage model.

    Subclasses declare which storage model backs them and how to read it.
    Instances copy the field values they expose, so they never see later
    changes to the model they were built from.
    """

    model_config = ConfigDict(frozen=True)

    @classmethod
    @abstractmethod
    def storage_model_class(cls) -> Type[StorageModel]:
        """Storage model class backing this type."""

    @classmethod
    @abstractmethod
    def from_storage_model(cls, model: StorageModel) -> "DataType":
        """Build an instance from a loaded storage model."""
