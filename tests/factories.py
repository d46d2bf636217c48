"""Builders for domain objects used across tests."""

from datetime import datetime, timedelta
from uuid import uuid4

from diary.domain.model import Authenticated, Comment, Diary, User
from diary.domain.repository import CommentRepository, DiaryRepository, UserRepository
from diary.domain.value import CommentId, DiaryId, Email, UserId, Username


def make_user(username: str = "alice", **overrides) -> User:
    fields = {
        "id": UserId(uuid4()),
        "username": Username(username),
        "email": Email(f"{username}@example.com"),
        "password_hash": "not-a-real-hash",
        "display_name": username.title(),
    }
    fields.update(overrides)
    return User(**fields)


async def make_actor(user_repo: UserRepository, username: str = "alice") -> Authenticated:
    """Save a user and return it as an authenticated actor."""
    user = await user_repo.save(make_user(username))
    return Authenticated(user=user)


async def make_diary(
    diary_repo: DiaryRepository,
    author: Authenticated,
    title: str = "A day",
    is_public: bool = True,
    age_minutes: int = 0,
) -> Diary:
    """Save a diary directly, bypassing the service.

    ``age_minutes`` backdates created_at so ordering tests are deterministic.
    """
    created = datetime.now() - timedelta(minutes=age_minutes)
    diary = Diary(
        id=DiaryId(uuid4()),
        title=title,
        content="Dear diary",
        author_id=author.user_id,
        is_public=is_public,
        created_at=created,
        updated_at=created,
    )
    return await diary_repo.save(diary)


async def make_comment(
    comment_repo: CommentRepository,
    diary: Diary,
    author: Authenticated,
    content: str = "Nice",
    parent: Comment | None = None,
    age_minutes: int = 0,
) -> Comment:
    """Save a comment directly, bypassing the service."""
    created = datetime.now() - timedelta(minutes=age_minutes)
    comment = Comment(
        id=CommentId(uuid4()),
        diary_id=diary.id,
        author_id=author.user_id,
        content=content,
        parent_id=parent.id if parent else None,
        created_at=created,
        updated_at=created,
    )
    return await comment_repo.save(comment)
