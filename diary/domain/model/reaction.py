"""Reaction entity.

Reactions are emoji responses held on a diary or a comment.
Each user holds at most one reaction per target.
"""

from datetime import datetime

from pydantic import Field

from diary.domain.model.common import DomainModel
from diary.domain.value import Emoji, ReactionTarget, UserId


class Reaction(DomainModel):
    """A single (user, emoji) pair on a target.

    Not addressable on its own: reactions are always read and written
    through their target.
    """

    target: ReactionTarget
    user_id: UserId
    emoji: Emoji
    created_at: datetime = Field(default_factory=datetime.now)
