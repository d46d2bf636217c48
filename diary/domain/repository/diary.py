"""Diary repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from pydantic import BaseModel

from diary.domain.model.diary import Diary
from diary.domain.value import DiaryId, UserId


class DiaryFilter(BaseModel):
    """Filter for diary listings.

    All criteria are optional and combined with AND.
    """

    author_id: Optional[UserId] = None
    is_public: Optional[bool] = None
    search: Optional[str] = None  # Case-insensitive substring of title


class DiaryRepository(ABC):
    """Repository for Diary aggregate.

    Defines the contract for diary persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, diary_id: DiaryId) -> Optional[Diary]:
        """Find a diary by ID.

        Args:
            diary_id: The diary's unique identifier

        Returns:
            The diary if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        filter: DiaryFilter,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Diary]:
        """Find diaries matching a filter, newest first.

        Args:
            filter: Listing criteria
            limit: Maximum number of diaries to return
            offset: Number of diaries to skip

        Returns:
            Diaries ordered by created_at descending
        """
        pass

    @abstractmethod
    async def count(self, filter: DiaryFilter) -> int:
        """Count diaries matching a filter.

        Args:
            filter: Listing criteria

        Returns:
            Total number of matching diaries
        """
        pass

    @abstractmethod
    async def save(self, diary: Diary) -> Diary:
        """Save a diary (create or update).

        Args:
            diary: The diary to save

        Returns:
            The saved diary
        """
        pass

    @abstractmethod
    async def delete(self, diary_id: DiaryId) -> None:
        """Delete a diary (hard delete).

        Callers remove comments and reactions first.

        Args:
            diary_id: The diary ID to delete
        """
        pass
