"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for Person, Account and AccountToken.

    Entities are immutable; services change them with
    ``model_copy(update=...)`` and save the copy.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,  # Allow value objects as fields
    )
