"""Toggle diary visibility use case."""

from uuid import UUID

from pydantic import BaseModel

from diary.application.usecase.base import BaseUseCase
from diary.application.usecase.common import DiaryItem
from diary.domain.model import Actor
from diary.domain.service import DiaryService, ReactionLedger, UserService
from diary.domain.value import DiaryId

from .list_public_diaries import present_diaries


class ToggleVisibilityRequest(BaseModel):
    """Toggle visibility request."""

    actor: Actor
    diary_id: UUID


class ToggleVisibilityResponse(BaseModel):
    """Toggle visibility response."""

    diary: DiaryItem
    message: str


class ToggleVisibilityUseCase(BaseUseCase):
    """Use case for publishing or unpublishing a diary."""

    def __init__(
        self,
        diary_service: DiaryService,
        user_service: UserService,
        reaction_ledger: ReactionLedger,
    ) -> None:
        """Initialize toggle visibility use case.

        Args:
            diary_service: Diary domain service
            user_service: User domain service
            reaction_ledger: Reaction ledger
        """
        self.diary_service = diary_service
        self.user_service = user_service
        self.reaction_ledger = reaction_ledger

    async def execute(self, request: ToggleVisibilityRequest) -> ToggleVisibilityResponse:
        """Execute toggle visibility flow.

        Raises:
            AuthenticationError: If the actor is a guest
            NotFoundError: If the diary doesn't exist
            NotAuthorizedError: If the actor doesn't own the diary
        """
        diary = await self.diary_service.toggle_visibility(
            request.actor, DiaryId(request.diary_id)
        )
        [item] = await present_diaries(
            [diary],
            request.actor,
            self.diary_service,
            self.user_service,
            self.reaction_ledger,
        )
        state = "public" if diary.is_public else "private"
        return ToggleVisibilityResponse(diary=item, message=f"Diary is now {state}")
