"""Diary aggregate root.

A diary entry belongs to exactly one user and is private until its owner
publishes it. Public entries accept comments and reactions.
"""

from datetime import datetime

from pydantic import Field

from diary.domain.model.common import DomainModel
from diary.domain.value import DiaryId, UserId

TITLE_MAX_LENGTH = 200


class Diary(DomainModel):
    """Diary aggregate root.

    Business rules:
    - Title is 1-200 characters after trimming
    - Content is non-empty, no upper bound
    - Only the author may edit, publish/unpublish or delete
    """

    id: DiaryId
    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    content: str = Field(min_length=1)
    author_id: UserId
    is_public: bool = False
    tags: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def is_owned_by(self, user_id: UserId) -> bool:
        """Whether the given user owns this entry."""
        return self.author_id == user_id
