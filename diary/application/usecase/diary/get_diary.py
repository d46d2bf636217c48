"""Get diary use case."""

from uuid import UUID

from pydantic import BaseModel

from diary.application.usecase.base import BaseUseCase
from diary.application.usecase.common import DiaryItem, author_info, diary_item
from diary.domain.model import Actor
from diary.domain.service import DiaryService, ReactionLedger, UserService
from diary.domain.value import DiaryId, ReactionTarget, ReactionTargetType


class GetDiaryRequest(BaseModel):
    """Get diary request."""

    actor: Actor
    diary_id: UUID


class GetDiaryUseCase(BaseUseCase):
    """Use case for reading one diary entry."""

    def __init__(
        self,
        diary_service: DiaryService,
        user_service: UserService,
        reaction_ledger: ReactionLedger,
    ) -> None:
        """Initialize get diary use case.

        Args:
            diary_service: Diary domain service
            user_service: User domain service
            reaction_ledger: Reaction ledger
        """
        self.diary_service = diary_service
        self.user_service = user_service
        self.reaction_ledger = reaction_ledger

    async def execute(self, request: GetDiaryRequest) -> DiaryItem:
        """Execute get diary flow.

        Private entries are readable by their owner only. A missing entry
        and a private one fail differently.

        Raises:
            NotFoundError: If the diary doesn't exist
            NotAuthorizedError: If it's private and the actor isn't the owner
        """
        diary_id = DiaryId(request.diary_id)
        diary = await self.diary_service.get_readable(request.actor, diary_id)

        state = await self.reaction_ledger.get_state(
            ReactionTarget(type=ReactionTargetType.DIARY, id=diary.id),
            request.actor.user_id,
        )
        users = await self.user_service.get_users_by_ids([diary.author_id])
        counts = await self.diary_service.comment_counts([diary.id])

        return diary_item(
            diary,
            author_info(diary.author_id, users),
            state,
            comment_count=counts.get(diary.id, 0),
        )
