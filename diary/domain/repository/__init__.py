"""Repository interfaces for the diary domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from diary.domain.repository.comment import CommentRepository
from diary.domain.repository.diary import DiaryFilter, DiaryRepository
from diary.domain.repository.reaction import ReactionRepository
from diary.domain.repository.user import UserRepository

__all__ = [
    "CommentRepository",
    "DiaryFilter",
    "DiaryRepository",
    "ReactionRepository",
    "UserRepository",
]
