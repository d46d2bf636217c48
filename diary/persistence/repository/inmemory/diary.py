"""In-memory diary repository for testing."""

from typing import List, Optional

from diary.domain.model import Diary
from diary.domain.repository import DiaryFilter, DiaryRepository
from diary.domain.value import DiaryId


class InMemoryDiaryRepository(DiaryRepository):
    """In-memory implementation of DiaryRepository for testing."""

    def __init__(self) -> None:
        self._diaries: dict[DiaryId, Diary] = {}

    def _matching(self, filter: DiaryFilter) -> List[Diary]:
        matches = []
        for diary in self._diaries.values():
            if filter.author_id is not None and diary.author_id != filter.author_id:
                continue
            if filter.is_public is not None and diary.is_public != filter.is_public:
                continue
            if filter.search and filter.search.lower() not in diary.title.lower():
                continue
            matches.append(diary)
        return sorted(matches, key=lambda d: d.created_at, reverse=True)

    async def find_by_id(self, diary_id: DiaryId) -> Optional[Diary]:
        return self._diaries.get(diary_id)

    async def find_all(
        self,
        filter: DiaryFilter,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Diary]:
        return self._matching(filter)[offset : offset + limit]

    async def count(self, filter: DiaryFilter) -> int:
        return len(self._matching(filter))

    async def save(self, diary: Diary) -> Diary:
        self._diaries[diary.id] = diary
        return diary

    async def delete(self, diary_id: DiaryId) -> None:
        self._diaries.pop(diary_id, None)
