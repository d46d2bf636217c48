"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .diary import InMemoryDiaryRepository
from .reaction import InMemoryReactionRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryDiaryRepository",
    "InMemoryReactionRepository",
    "InMemoryUserRepository",
]
