"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import List, Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from diary.domain.model import Comment
from diary.domain.repository import CommentRepository
from diary.domain.value import CommentId, DiaryId
from diary.persistence.mappers import comment_to_dict, row_to_comment
from diary.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def find_top_level(
        self,
        diary_id: DiaryId,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        """Find top-level comments of a diary, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.diary_id == diary_id)
            .where(comments_table.c.parent_id.is_(None))
            .order_by(comments_table.c.created_at.desc(), comments_table.c.id)
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def count_top_level(self, diary_id: DiaryId) -> int:
        """Count top-level comments of a diary."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.diary_id == diary_id)
            .where(comments_table.c.parent_id.is_(None))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_replies(self, parent_ids: Sequence[CommentId]) -> List[Comment]:
        """Find replies to any of the given comments, oldest first."""
        if not parent_ids:
            return []

        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_id.in_(parent_ids))
            .order_by(comments_table.c.created_at.asc(), comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def count_by_diaries(
        self, diary_ids: Sequence[DiaryId]
    ) -> dict[DiaryId, int]:
        """Count comments per diary (both levels) in one grouped query."""
        if not diary_ids:
            return {}

        stmt = (
            select(comments_table.c.diary_id, func.count().label("count"))
            .where(comments_table.c.diary_id.in_(diary_ids))
            .group_by(comments_table.c.diary_id)
        )
        result = await self.session.execute(stmt)
        return {DiaryId(row.diary_id): row.count for row in result}

    async def find_ids_by_diary(self, diary_id: DiaryId) -> List[CommentId]:
        """IDs of every comment on a diary."""
        stmt = select(comments_table.c.id).where(comments_table.c.diary_id == diary_id)
        result = await self.session.execute(stmt)
        return [CommentId(comment_id) for comment_id in result.scalars().all()]

    async def find_reply_ids(self, parent_id: CommentId) -> List[CommentId]:
        """IDs of the direct replies to a comment."""
        stmt = select(comments_table.c.id).where(
            comments_table.c.parent_id == parent_id
        )
        result = await self.session.execute(stmt)
        return [CommentId(comment_id) for comment_id in result.scalars().all()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        existing = await self.find_by_id(comment.id)

        comment_dict = comment_to_dict(comment)

        if existing:
            stmt = (
                comments_table.update()
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = comments_table.insert().values(**comment_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Update comment text and bump updated_at in one statement."""
        stmt = (
            comments_table.update()
            .where(comments_table.c.id == comment_id)
            .values(content=content, updated_at=datetime.now())
            .returning(*comments_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_comment(dict(row)) if row else None

    async def delete_many(self, comment_ids: Sequence[CommentId]) -> int:
        """Delete comments by ID."""
        if not comment_ids:
            return 0

        stmt = comments_table.delete().where(comments_table.c.id.in_(comment_ids))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
