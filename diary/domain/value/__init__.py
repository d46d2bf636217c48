"""Domain value objects for the diary service."""

from diary.domain.value.identifiers import (
    CommentId,
    DiaryId,
    UserId,
)
from diary.domain.value.types import (
    Email,
    Emoji,
    ReactionTarget,
    ReactionTargetType,
    Reply,
    ThreadPosition,
    TopLevel,
    Username,
)

__all__ = [
    # Identifiers
    "UserId",
    "DiaryId",
    "CommentId",
    # Types
    "Email",
    "Emoji",
    "ReactionTarget",
    "ReactionTargetType",
    "Reply",
    "ThreadPosition",
    "TopLevel",
    "Username",
]
