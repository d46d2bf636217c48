"""Domain services."""

from .auth_service import AuthService
from .base import Service
from .comment_service import CommentService, CommentThread
from .diary_service import DiaryService
from .jwt_service import JWTService
from .reaction_service import ReactionLedger, ReactionState
from .user_service import UserService

__all__ = [
    "AuthService",
    "CommentService",
    "CommentThread",
    "DiaryService",
    "JWTService",
    "ReactionLedger",
    "ReactionState",
    "Service",
    "UserService",
]
