"""PostgreSQL implementation of Reaction repository."""

from datetime import datetime
from typing import List, Sequence
from uuid import UUID

from sqlalchemy import and_, delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from diary.domain.model import Reaction
from diary.domain.repository import ReactionRepository
from diary.domain.value import Emoji, ReactionTarget, ReactionTargetType, UserId
from diary.persistence.mappers import row_to_reaction
from diary.persistence.tables import reactions_table


def _target_clause(target: ReactionTarget):
    return and_(
        reactions_table.c.target_type == target.type.value,
        reactions_table.c.target_id == target.id,
    )


class PostgresReactionRepository(ReactionRepository):
    """PostgreSQL implementation of ReactionRepository.

    One row per (target, user). Toggles touch only the acting user's row,
    so concurrent toggles by different users on the same target can't
    overwrite each other.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_target(self, target: ReactionTarget) -> List[Reaction]:
        """Find all reactions on a target, oldest first."""
        stmt = (
            select(reactions_table)
            .where(_target_clause(target))
            .order_by(reactions_table.c.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_reaction(dict(row)) for row in result.mappings().all()]

    async def find_by_targets(
        self,
        target_type: ReactionTargetType,
        target_ids: Sequence[UUID],
    ) -> List[Reaction]:
        """Find reactions on several targets (batch query)."""
        if not target_ids:
            return []

        stmt = (
            select(reactions_table)
            .where(reactions_table.c.target_type == target_type.value)
            .where(reactions_table.c.target_id.in_(target_ids))
            .order_by(reactions_table.c.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_reaction(dict(row)) for row in result.mappings().all()]

    async def toggle(
        self,
        target: ReactionTarget,
        user_id: UserId,
        emoji: Emoji,
    ) -> List[Reaction]:
        """Toggle the user's reaction with row-level statements.

        DELETE ... RETURNING removes whatever the user held. If that was a
        different emoji (or nothing), the new one is inserted; ON CONFLICT
        covers a concurrent toggle by the same user landing in between.
        """
        removed = await self.session.execute(
            delete(reactions_table)
            .where(_target_clause(target))
            .where(reactions_table.c.user_id == user_id)
            .returning(reactions_table.c.emoji)
        )
        previous = removed.scalar_one_or_none()

        if previous != emoji.value:
            now = datetime.now()
            stmt = insert(reactions_table).values(
                target_type=target.type.value,
                target_id=target.id,
                user_id=user_id,
                emoji=emoji.value,
                created_at=now,
            )
            stmt = stmt.on_conflict_do_update(
                index_elements=["target_type", "target_id", "user_id"],
                set_={"emoji": emoji.value, "created_at": now},
            )
            await self.session.execute(stmt)

        await self.session.flush()
        return await self.find_by_target(target)

    async def delete_by_targets(
        self,
        target_type: ReactionTargetType,
        target_ids: Sequence[UUID],
    ) -> int:
        """Delete every reaction on the given targets."""
        if not target_ids:
            return 0

        stmt = (
            delete(reactions_table)
            .where(reactions_table.c.target_type == target_type.value)
            .where(reactions_table.c.target_id.in_(target_ids))
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
