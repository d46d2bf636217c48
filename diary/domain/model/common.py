"""Base model for diary domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for users, diaries, comments and reactions.

    Entities are immutable: services build updated copies with
    ``model_copy(update=...)`` and hand them to a repository.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )
