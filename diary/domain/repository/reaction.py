"""Reaction repository interface."""

from abc import ABC, abstractmethod
from typing import List, Sequence
from uuid import UUID

from diary.domain.model.reaction import Reaction
from diary.domain.value import Emoji, ReactionTarget, ReactionTargetType, UserId


class ReactionRepository(ABC):
    """Repository for reactions on diaries and comments.

    Reactions are keyed by (target, user): a user holds at most one
    reaction per target.
    """

    @abstractmethod
    async def find_by_target(self, target: ReactionTarget) -> List[Reaction]:
        """Find all reactions on a target, oldest first.

        Args:
            target: Diary or comment reference

        Returns:
            Reactions on the target
        """
        pass

    @abstractmethod
    async def find_by_targets(
        self,
        target_type: ReactionTargetType,
        target_ids: Sequence[UUID],
    ) -> List[Reaction]:
        """Find reactions on several targets of one kind (batch query).

        Args:
            target_type: Kind of target
            target_ids: Target IDs

        Returns:
            Reactions on any of the targets, oldest first
        """
        pass

    @abstractmethod
    async def toggle(
        self,
        target: ReactionTarget,
        user_id: UserId,
        emoji: Emoji,
    ) -> List[Reaction]:
        """Atomically apply the toggle rule for one user on one target.

        If the user holds exactly ``emoji``, it is removed. Otherwise any
        reaction the user holds on the target is replaced by ``emoji``.
        Implementations must not read-modify-write the whole reaction set,
        so concurrent toggles by different users never lose an update.

        Args:
            target: Diary or comment reference
            user_id: Reacting user
            emoji: Chosen emoji

        Returns:
            The target's reactions after the toggle
        """
        pass

    @abstractmethod
    async def delete_by_targets(
        self,
        target_type: ReactionTargetType,
        target_ids: Sequence[UUID],
    ) -> int:
        """Delete every reaction on the given targets.

        Args:
            target_type: Kind of target
            target_ids: Target IDs

        Returns:
            Number of reactions deleted
        """
        pass
