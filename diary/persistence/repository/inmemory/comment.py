"""In-memory comment repository for testing."""

from datetime import datetime
from typing import List, Optional, Sequence

from diary.domain.model import Comment
from diary.domain.repository import CommentRepository
from diary.domain.value import CommentId, DiaryId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        return self._comments.get(comment_id)

    async def find_top_level(
        self,
        diary_id: DiaryId,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        top_level = [
            c
            for c in self._comments.values()
            if c.diary_id == diary_id and c.parent_id is None
        ]
        top_level.sort(key=lambda c: c.created_at, reverse=True)
        return top_level[offset : offset + limit]

    async def count_top_level(self, diary_id: DiaryId) -> int:
        return sum(
            1
            for c in self._comments.values()
            if c.diary_id == diary_id and c.parent_id is None
        )

    async def find_replies(self, parent_ids: Sequence[CommentId]) -> List[Comment]:
        wanted = set(parent_ids)
        replies = [c for c in self._comments.values() if c.parent_id in wanted]
        return sorted(replies, key=lambda c: c.created_at)

    async def count_by_diaries(
        self, diary_ids: Sequence[DiaryId]
    ) -> dict[DiaryId, int]:
        counts: dict[DiaryId, int] = {}
        wanted = set(diary_ids)
        for comment in self._comments.values():
            if comment.diary_id in wanted:
                counts[comment.diary_id] = counts.get(comment.diary_id, 0) + 1
        return counts

    async def find_ids_by_diary(self, diary_id: DiaryId) -> List[CommentId]:
        return [c.id for c in self._comments.values() if c.diary_id == diary_id]

    async def find_reply_ids(self, parent_id: CommentId) -> List[CommentId]:
        return [c.id for c in self._comments.values() if c.parent_id == parent_id]

    async def save(self, comment: Comment) -> Comment:
        self._comments[comment.id] = comment
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        comment = self._comments.get(comment_id)
        if not comment:
            return None
        updated = comment.model_copy(
            update={"content": content, "updated_at": datetime.now()}
        )
        self._comments[comment_id] = updated
        return updated

    async def delete_many(self, comment_ids: Sequence[CommentId]) -> int:
        deleted = 0
        for comment_id in comment_ids:
            if self._comments.pop(comment_id, None) is not None:
                deleted += 1
        return deleted
