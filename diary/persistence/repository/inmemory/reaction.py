"""In-memory reaction repository for testing."""

from typing import List, Sequence
from uuid import UUID

from diary.domain.model import Reaction
from diary.domain.repository import ReactionRepository
from diary.domain.service.reaction_service import toggle_reaction
from diary.domain.value import Emoji, ReactionTarget, ReactionTargetType, UserId


class InMemoryReactionRepository(ReactionRepository):
    """In-memory implementation of ReactionRepository for testing.

    ``toggle`` reads and writes without awaiting in between, so it is
    atomic with respect to other coroutines on the same event loop.
    """

    def __init__(self) -> None:
        self._reactions: dict[ReactionTarget, list[Reaction]] = {}

    async def find_by_target(self, target: ReactionTarget) -> List[Reaction]:
        return list(self._reactions.get(target, []))

    async def find_by_targets(
        self,
        target_type: ReactionTargetType,
        target_ids: Sequence[UUID],
    ) -> List[Reaction]:
        found: list[Reaction] = []
        for target_id in target_ids:
            target = ReactionTarget(type=target_type, id=target_id)
            found.extend(self._reactions.get(target, []))
        return sorted(found, key=lambda r: r.created_at)

    async def toggle(
        self,
        target: ReactionTarget,
        user_id: UserId,
        emoji: Emoji,
    ) -> List[Reaction]:
        current = self._reactions.get(target, [])
        updated = toggle_reaction(current, target, user_id, emoji)
        self._reactions[target] = updated
        return list(updated)

    async def delete_by_targets(
        self,
        target_type: ReactionTargetType,
        target_ids: Sequence[UUID],
    ) -> int:
        deleted = 0
        for target_id in target_ids:
            target = ReactionTarget(type=target_type, id=target_id)
            deleted += len(self._reactions.pop(target, []))
        return deleted
