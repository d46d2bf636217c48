"""PostgreSQL implementation of Diary repository."""

from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from diary.domain.model import Diary
from diary.domain.repository import DiaryFilter, DiaryRepository
from diary.domain.value import DiaryId
from diary.persistence.mappers import diary_to_dict, row_to_diary
from diary.persistence.tables import diaries_table


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so user input matches literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class PostgresDiaryRepository(DiaryRepository):
    """PostgreSQL implementation of DiaryRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _apply_filter(self, stmt, filter: DiaryFilter):
        if filter.author_id is not None:
            stmt = stmt.where(diaries_table.c.author_id == filter.author_id)
        if filter.is_public is not None:
            stmt = stmt.where(diaries_table.c.is_public == filter.is_public)
        if filter.search:
            stmt = stmt.where(
                diaries_table.c.title.ilike(
                    f"%{escape_like(filter.search)}%", escape="\\"
                )
            )
        return stmt

    async def find_by_id(self, diary_id: DiaryId) -> Optional[Diary]:
        """Find a diary by ID."""
        stmt = select(diaries_table).where(diaries_table.c.id == diary_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_diary(dict(row)) if row else None

    async def find_all(
        self,
        filter: DiaryFilter,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Diary]:
        """Find diaries matching a filter, newest first."""
        stmt = self._apply_filter(select(diaries_table), filter)
        stmt = (
            stmt.order_by(diaries_table.c.created_at.desc(), diaries_table.c.id)
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_diary(dict(row)) for row in result.mappings().all()]

    async def count(self, filter: DiaryFilter) -> int:
        """Count diaries matching a filter."""
        stmt = self._apply_filter(
            select(func.count()).select_from(diaries_table), filter
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, diary: Diary) -> Diary:
        """Save a diary (create or update)."""
        existing = await self.find_by_id(diary.id)

        diary_dict = diary_to_dict(diary)

        if existing:
            stmt = (
                diaries_table.update()
                .where(diaries_table.c.id == diary.id)
                .values(**diary_dict)
            )
        else:
            stmt = diaries_table.insert().values(**diary_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return diary

    async def delete(self, diary_id: DiaryId) -> None:
        """Delete a diary (hard delete)."""
        stmt = diaries_table.delete().where(diaries_table.c.id == diary_id)
        await self.session.execute(stmt)
        await self.session.flush()
