"""PostgreSQL repository implementations."""

from diary.persistence.repository.comment import PostgresCommentRepository
from diary.persistence.repository.diary import PostgresDiaryRepository
from diary.persistence.repository.reaction import PostgresReactionRepository
from diary.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresDiaryRepository",
    "PostgresCommentRepository",
    "PostgresReactionRepository",
]
