"""Reaction ledger domain service.

Holds the toggle rule and the per-emoji summary shared by diaries and
comments. The pure functions work on plain reaction sequences; the service
persists toggles through ReactionRepository.
"""

from collections import defaultdict
from datetime import datetime
from typing import Optional, Sequence
from uuid import UUID

import logfire
from pydantic import BaseModel

from diary.domain.error import ValidationError
from diary.domain.model.reaction import Reaction
from diary.domain.repository import ReactionRepository
from diary.domain.value import Emoji, ReactionTarget, ReactionTargetType, UserId

from .base import Service


class ReactionState(BaseModel):
    """Reactions on one target as seen by one actor."""

    reactions: list[Reaction]
    summary: dict[str, int]
    user_reaction: Optional[Emoji] = None


def parse_emoji(value: str | None) -> Emoji:
    """Parse a raw emoji, raising ValidationError for anything outside the set."""
    try:
        return Emoji.parse(value)
    except ValueError as e:
        raise ValidationError(str(e)) from None


def toggle_reaction(
    reactions: Sequence[Reaction],
    target: ReactionTarget,
    user_id: UserId,
    emoji: Emoji,
) -> list[Reaction]:
    """Apply the toggle rule to a reaction set.

    If the user holds exactly ``emoji`` it is removed. Otherwise the user's
    previous reaction (if any) is dropped and ``emoji`` is appended, so a
    user ends up with at most one reaction. Applying the same toggle twice
    returns the original set.

    Args:
        reactions: Current reactions on the target
        target: The target the reactions belong to
        user_id: Reacting user
        emoji: Chosen emoji

    Returns:
        New reaction list (input is not modified)
    """
    existing = user_reaction(reactions, user_id)
    others = [r for r in reactions if r.user_id != user_id]
    if existing == emoji:
        return others
    return [
        *others,
        Reaction(target=target, user_id=user_id, emoji=emoji, created_at=datetime.now()),
    ]


def summarize(reactions: Sequence[Reaction]) -> dict[str, int]:
    """Count reactions per emoji. Emoji with no reactions are omitted."""
    counts: dict[str, int] = defaultdict(int)
    for reaction in reactions:
        counts[reaction.emoji.value] += 1
    return dict(counts)


def user_reaction(
    reactions: Sequence[Reaction], user_id: Optional[UserId]
) -> Optional[Emoji]:
    """Emoji held by the user on this target, if any."""
    if user_id is None:
        return None
    for reaction in reactions:
        if reaction.user_id == user_id:
            return reaction.emoji
    return None


def build_state(
    reactions: Sequence[Reaction], user_id: Optional[UserId]
) -> ReactionState:
    return ReactionState(
        reactions=list(reactions),
        summary=summarize(reactions),
        user_reaction=user_reaction(reactions, user_id),
    )


class ReactionLedger(Service):
    """Domain service for reactions on diaries and comments."""

    def __init__(self, reaction_repository: ReactionRepository) -> None:
        """Initialize reaction ledger.

        Args:
            reaction_repository: Reaction repository
        """
        self.reaction_repository = reaction_repository

    async def toggle(
        self,
        target: ReactionTarget,
        user_id: UserId,
        emoji: Emoji,
    ) -> ReactionState:
        """Toggle a user's reaction on a target.

        Permission checks happen before this is called.

        Args:
            target: Diary or comment reference
            user_id: Reacting user
            emoji: Chosen emoji

        Returns:
            Reaction state after the toggle
        """
        with logfire.span(
            "reaction_ledger.toggle",
            target_type=target.type.value,
            target_id=str(target.id),
            user_id=str(user_id),
            emoji=emoji.value,
        ):
            reactions = await self.reaction_repository.toggle(target, user_id, emoji)
            state = build_state(reactions, user_id)
            logfire.info(
                "Reaction toggled",
                target_type=target.type.value,
                target_id=str(target.id),
                user_id=str(user_id),
                user_reaction=state.user_reaction.value if state.user_reaction else None,
                total=len(reactions),
            )
            return state

    async def get_state(
        self, target: ReactionTarget, user_id: Optional[UserId] = None
    ) -> ReactionState:
        """Get reactions on a single target.

        Args:
            target: Diary or comment reference
            user_id: Viewing user, for ``user_reaction``

        Returns:
            Reaction state of the target
        """
        reactions = await self.reaction_repository.find_by_target(target)
        return build_state(reactions, user_id)

    async def get_states(
        self,
        target_type: ReactionTargetType,
        target_ids: Sequence[UUID],
        user_id: Optional[UserId] = None,
    ) -> dict[UUID, ReactionState]:
        """Get reactions for many targets of one kind in a single query.

        Args:
            target_type: Kind of target
            target_ids: Target IDs
            user_id: Viewing user, for ``user_reaction``

        Returns:
            Mapping of target ID to reaction state (every ID is present)
        """
        if not target_ids:
            return {}

        reactions = await self.reaction_repository.find_by_targets(
            target_type, target_ids
        )
        grouped: dict[UUID, list[Reaction]] = {tid: [] for tid in target_ids}
        for reaction in reactions:
            grouped.setdefault(reaction.target.id, []).append(reaction)
        return {tid: build_state(rs, user_id) for tid, rs in grouped.items()}

    async def purge(
        self, target_type: ReactionTargetType, target_ids: Sequence[UUID]
    ) -> int:
        """Delete every reaction on the given targets.

        Args:
            target_type: Kind of target
            target_ids: Target IDs being deleted

        Returns:
            Number of reactions removed
        """
        if not target_ids:
            return 0

        with logfire.span(
            "reaction_ledger.purge",
            target_type=target_type.value,
            target_count=len(target_ids),
        ):
            deleted = await self.reaction_repository.delete_by_targets(
                target_type, target_ids
            )
            logfire.info(
                "Reactions purged",
                target_type=target_type.value,
                deleted=deleted,
            )
            return deleted
