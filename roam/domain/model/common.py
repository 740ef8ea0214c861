"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Entities are frozen: changes are made by building a new instance with
    ``model_copy(update=...)`` and persisting it, never by mutating one that
    a repository handed back.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,  # Allow custom value objects
    )
