"""Comment entity.

Comments are threaded at most two levels deep: a top-level comment on a
diary and its direct replies. Replies cannot have replies.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from diary.domain.model.common import DomainModel
from diary.domain.value import CommentId, DiaryId, Reply, ThreadPosition, TopLevel, UserId

CONTENT_MAX_LENGTH = 1000


class Comment(DomainModel):
    """Comment entity.

    Threading is stored as a nullable ``parent_id`` (None for top-level)
    and read through ``position``. A reply's parent is always top-level,
    which CommentService checks before saving.
    """

    id: CommentId
    diary_id: DiaryId
    author_id: UserId
    content: str = Field(min_length=1, max_length=CONTENT_MAX_LENGTH)
    parent_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def position(self) -> ThreadPosition:
        """Thread position as a tagged value."""
        if self.parent_id is None:
            return TopLevel()
        return Reply(parent_id=self.parent_id)

    @property
    def is_top_level(self) -> bool:
        return isinstance(self.position, TopLevel)
