"""Update diary use case."""

from uuid import UUID

from pydantic import BaseModel

from diary.application.usecase.base import BaseUseCase
from diary.application.usecase.common import DiaryItem
from diary.domain.model import Actor
from diary.domain.service import DiaryService, ReactionLedger, UserService
from diary.domain.value import DiaryId

from .list_public_diaries import present_diaries


class UpdateDiaryRequest(BaseModel):
    """Update diary request. Omitted fields keep their current value."""

    actor: Actor
    diary_id: UUID
    title: str | None = None
    content: str | None = None
    is_public: bool | None = None
    tags: list[str] | None = None


class UpdateDiaryUseCase(BaseUseCase):
    """Use case for editing a diary entry."""

    def __init__(
        self,
        diary_service: DiaryService,
        user_service: UserService,
        reaction_ledger: ReactionLedger,
    ) -> None:
        """Initialize update diary use case.

        Args:
            diary_service: Diary domain service
            user_service: User domain service
            reaction_ledger: Reaction ledger
        """
        self.diary_service = diary_service
        self.user_service = user_service
        self.reaction_ledger = reaction_ledger

    async def execute(self, request: UpdateDiaryRequest) -> DiaryItem:
        """Execute update diary flow.

        Raises:
            AuthenticationError: If the actor is a guest
            NotFoundError: If the diary doesn't exist
            NotAuthorizedError: If the actor doesn't own the diary
            ValidationError: If a provided field is invalid
        """
        diary = await self.diary_service.update_diary(
            request.actor,
            DiaryId(request.diary_id),
            title=request.title,
            content=request.content,
            is_public=request.is_public,
            tags=request.tags,
        )
        [item] = await present_diaries(
            [diary],
            request.actor,
            self.diary_service,
            self.user_service,
            self.reaction_ledger,
        )
        return item
