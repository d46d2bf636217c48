"""Response models shared by diary and comment use cases."""

import math
from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from diary.domain.model import Comment, Diary, User
from diary.domain.service import ReactionState
from diary.domain.value import UserId


class AuthorInfo(BaseModel):
    """Public author details shown next to diaries and comments."""

    user_id: str
    username: str | None
    display_name: str | None
    avatar_url: str | None


class ReactionItem(BaseModel):
    """A single reaction."""

    user_id: str
    emoji: str
    created_at: datetime


class ReactionStateItem(BaseModel):
    """Reactions on a target, with the viewer's own reaction."""

    reactions: list[ReactionItem]
    reaction_summary: dict[str, int]
    user_reaction: str | None


class DiaryItem(ReactionStateItem):
    """Diary in responses."""

    id: str
    title: str
    content: str
    author: AuthorInfo
    is_public: bool
    tags: list[str]
    comment_count: int | None = None
    created_at: datetime
    updated_at: datetime


class CommentItem(ReactionStateItem):
    """Comment in responses. Top-level comments carry their replies."""

    id: str
    diary_id: str
    author: AuthorInfo
    content: str
    parent_id: str | None
    replies: list["CommentItem"] | None = None
    created_at: datetime
    updated_at: datetime


class Pagination(BaseModel):
    """Page metadata for list responses."""

    page: int
    limit: int
    total: int
    pages: int

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "Pagination":
        return cls(page=page, limit=limit, total=total, pages=math.ceil(total / limit))


def offset_for(page: int, limit: int) -> int:
    return (page - 1) * limit


def author_info(user_id: UserId, users: dict[UserId, User]) -> AuthorInfo:
    """Author details for a user ID; fields are None if the user is gone."""
    user = users.get(user_id)
    if not user:
        return AuthorInfo(
            user_id=str(user_id), username=None, display_name=None, avatar_url=None
        )
    return AuthorInfo(
        user_id=str(user.id),
        username=user.username.root,
        display_name=user.display_name,
        avatar_url=user.avatar_url,
    )


def reaction_state_item(state: ReactionState) -> ReactionStateItem:
    return ReactionStateItem(**reaction_fields(state))


def reaction_fields(state: Optional[ReactionState]) -> dict:
    if state is None:
        return {"reactions": [], "reaction_summary": {}, "user_reaction": None}
    return {
        "reactions": [
            ReactionItem(
                user_id=str(r.user_id), emoji=r.emoji.value, created_at=r.created_at
            )
            for r in state.reactions
        ],
        "reaction_summary": state.summary,
        "user_reaction": state.user_reaction.value if state.user_reaction else None,
    }


def diary_item(
    diary: Diary,
    author: AuthorInfo,
    state: Optional[ReactionState],
    comment_count: int | None = None,
) -> DiaryItem:
    return DiaryItem(
        id=str(diary.id),
        title=diary.title,
        content=diary.content,
        author=author,
        is_public=diary.is_public,
        tags=list(diary.tags),
        comment_count=comment_count,
        created_at=diary.created_at,
        updated_at=diary.updated_at,
        **reaction_fields(state),
    )


def comment_item(
    comment: Comment,
    author: AuthorInfo,
    state: Optional[ReactionState],
    replies: list[CommentItem] | None = None,
) -> CommentItem:
    return CommentItem(
        id=str(comment.id),
        diary_id=str(comment.diary_id),
        author=author,
        content=comment.content,
        parent_id=str(comment.parent_id) if comment.parent_id else None,
        replies=replies,
        created_at=comment.created_at,
        updated_at=comment.updated_at,
        **reaction_fields(state),
    )
