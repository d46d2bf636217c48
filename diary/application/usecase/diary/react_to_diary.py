"""React to diary use case."""

from uuid import UUID

from pydantic import BaseModel

from diary.application.usecase.base import BaseUseCase
from diary.application.usecase.common import ReactionStateItem, reaction_state_item
from diary.domain.model import Actor
from diary.domain.service import DiaryService
from diary.domain.value import DiaryId


class ReactToDiaryRequest(BaseModel):
    """React to diary request."""

    actor: Actor
    diary_id: UUID
    emoji: str | None = None


class ReactToDiaryUseCase(BaseUseCase):
    """Use case for toggling a reaction on a public diary.

    Sending the same emoji twice removes the reaction again; this call is
    a toggle, not an idempotent set.
    """

    def __init__(self, diary_service: DiaryService) -> None:
        """Initialize react to diary use case.

        Args:
            diary_service: Diary domain service
        """
        self.diary_service = diary_service

    async def execute(self, request: ReactToDiaryRequest) -> ReactionStateItem:
        """Execute react to diary flow.

        Raises:
            AuthenticationError: If the actor is a guest
            ValidationError: If the emoji isn't allowed
            NotFoundError: If the diary doesn't exist
            NotAuthorizedError: If the diary is private
        """
        state = await self.diary_service.react(
            request.actor, DiaryId(request.diary_id), request.emoji
        )
        return reaction_state_item(state)
