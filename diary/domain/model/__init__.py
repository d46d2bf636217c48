"""Domain model entities for the diary service."""

from diary.domain.model.actor import GUEST, Actor, Authenticated, Guest
from diary.domain.model.comment import Comment
from diary.domain.model.diary import Diary
from diary.domain.model.reaction import Reaction
from diary.domain.model.user import User

__all__ = [
    "Actor",
    "Authenticated",
    "Comment",
    "Diary",
    "GUEST",
    "Guest",
    "Reaction",
    "User",
]
