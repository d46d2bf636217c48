"""Delete diary use case."""

from uuid import UUID

from pydantic import BaseModel

from diary.application.usecase.base import BaseUseCase
from diary.domain.model import Actor
from diary.domain.service import DiaryService
from diary.domain.value import DiaryId


class DeleteDiaryRequest(BaseModel):
    """Delete diary request."""

    actor: Actor
    diary_id: UUID


class DeleteDiaryResponse(BaseModel):
    """Delete diary response."""

    diary_id: str


class DeleteDiaryUseCase(BaseUseCase):
    """Use case for deleting a diary with its comments and reactions."""

    def __init__(self, diary_service: DiaryService) -> None:
        """Initialize delete diary use case.

        Args:
            diary_service: Diary domain service
        """
        self.diary_service = diary_service

    async def execute(self, request: DeleteDiaryRequest) -> DeleteDiaryResponse:
        """Execute delete diary flow.

        Raises:
            AuthenticationError: If the actor is a guest
            NotFoundError: If the diary doesn't exist
            NotAuthorizedError: If the actor doesn't own the diary
        """
        diary_id = DiaryId(request.diary_id)
        await self.diary_service.delete_diary(request.actor, diary_id)
        return DeleteDiaryResponse(diary_id=str(diary_id))
