"""Mappers for converting between database rows and domain models.

Domain models are frozen pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from diary.domain.model import Comment, Diary, Reaction, User
from diary.domain.value import (
    CommentId,
    DiaryId,
    Email,
    Emoji,
    ReactionTarget,
    ReactionTargetType,
    UserId,
    Username,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        email=Email(row["email"]),
        password_hash=row["password_hash"],
        display_name=row.get("display_name"),
        avatar_url=row.get("avatar_url"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": user.id,
        "username": user.username.root,
        "email": user.email.root,
        "password_hash": user.password_hash,
        "display_name": user.display_name,
        "avatar_url": user.avatar_url,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def row_to_diary(row: Dict[str, Any]) -> Diary:
    """Convert database row to Diary domain model."""
    return Diary(
        id=DiaryId(_uuid(row["id"])),
        title=row["title"],
        content=row["content"],
        author_id=UserId(_uuid(row["author_id"])),
        is_public=row["is_public"],
        tags=list(row.get("tags") or []),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def diary_to_dict(diary: Diary) -> Dict[str, Any]:
    """Convert Diary domain model to database dict."""
    return diary.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    parent_id = row.get("parent_id")
    return Comment(
        id=CommentId(_uuid(row["id"])),
        diary_id=DiaryId(_uuid(row["diary_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        parent_id=CommentId(_uuid(parent_id)) if parent_id else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_reaction(row: Dict[str, Any]) -> Reaction:
    """Convert database row to Reaction domain model."""
    return Reaction(
        target=ReactionTarget(
            type=ReactionTargetType(row["target_type"]),
            id=_uuid(row["target_id"]),
        ),
        user_id=UserId(_uuid(row["user_id"])),
        emoji=Emoji(row["emoji"]),
        created_at=row["created_at"],
    )


def reaction_to_dict(reaction: Reaction) -> Dict[str, Any]:
    """Convert Reaction domain model to database dict."""
    return {
        "target_type": reaction.target.type.value,
        "target_id": reaction.target.id,
        "user_id": reaction.user_id,
        "emoji": reaction.emoji.value,
        "created_at": reaction.created_at,
    }
