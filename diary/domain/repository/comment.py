"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from diary.domain.model.comment import Comment
from diary.domain.value import CommentId, DiaryId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_top_level(
        self,
        diary_id: DiaryId,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        """Find top-level comments of a diary, newest first.

        Args:
            diary_id: The diary ID
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            Top-level comments ordered by created_at descending
        """
        pass

    @abstractmethod
    async def count_top_level(self, diary_id: DiaryId) -> int:
        """Count top-level comments of a diary.

        Args:
            diary_id: The diary ID

        Returns:
            Number of top-level comments
        """
        pass

    @abstractmethod
    async def find_replies(self, parent_ids: Sequence[CommentId]) -> List[Comment]:
        """Find replies to any of the given comments (batch query).

        Args:
            parent_ids: Top-level comment IDs

        Returns:
            Replies ordered by created_at ascending
        """
        pass

    @abstractmethod
    async def count_by_diaries(
        self, diary_ids: Sequence[DiaryId]
    ) -> dict[DiaryId, int]:
        """Count comments per diary, top-level and replies together.

        Args:
            diary_ids: Diary IDs to count for

        Returns:
            Mapping of diary ID to comment count (diaries without
            comments may be absent)
        """
        pass

    @abstractmethod
    async def find_ids_by_diary(self, diary_id: DiaryId) -> List[CommentId]:
        """IDs of every comment on a diary, both thread levels."""
        pass

    @abstractmethod
    async def find_reply_ids(self, parent_id: CommentId) -> List[CommentId]:
        """IDs of the direct replies to a comment."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Update the content of a comment and bump updated_at.

        Args:
            comment_id: ID of the comment to update
            content: New content (already validated)

        Returns:
            Updated comment, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def delete_many(self, comment_ids: Sequence[CommentId]) -> int:
        """Delete comments by ID (hard delete).

        Args:
            comment_ids: Comment IDs to delete

        Returns:
            Number of comments deleted
        """
        pass
