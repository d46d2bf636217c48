"""List my diaries use case."""

import logfire
from pydantic import BaseModel, Field

from diary.application.usecase.base import BaseUseCase
from diary.application.usecase.common import Pagination, offset_for
from diary.domain.model import Actor
from diary.domain.repository import DiaryFilter
from diary.domain.service import DiaryService, ReactionLedger, UserService
from diary.domain.service.visibility import require_authenticated

from .list_public_diaries import ListDiariesResponse, present_diaries


class ListMyDiariesRequest(BaseModel):
    """List my diaries request."""

    actor: Actor
    is_public: bool | None = None  # None lists both
    search: str | None = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)


class ListMyDiariesUseCase(BaseUseCase):
    """Use case for listing the actor's own diaries, private ones included."""

    def __init__(
        self,
        diary_service: DiaryService,
        user_service: UserService,
        reaction_ledger: ReactionLedger,
    ) -> None:
        """Initialize list my diaries use case.

        Args:
            diary_service: Diary domain service
            user_service: User domain service
            reaction_ledger: Reaction ledger
        """
        self.diary_service = diary_service
        self.user_service = user_service
        self.reaction_ledger = reaction_ledger

    async def execute(self, request: ListMyDiariesRequest) -> ListDiariesResponse:
        """Execute owned diary listing.

        Raises:
            AuthenticationError: If the actor is a guest
        """
        owner = require_authenticated(request.actor, "list your diaries")
        with logfire.span(
            "list_my_diaries.execute",
            user_id=str(owner.user_id),
            is_public=request.is_public,
            page=request.page,
        ):
            filter = DiaryFilter(
                author_id=owner.user_id,
                is_public=request.is_public,
                search=request.search or None,
            )
            diaries, total = await self.diary_service.list_diaries(
                filter, request.limit, offset_for(request.page, request.limit)
            )
            items = await present_diaries(
                diaries,
                owner,
                self.diary_service,
                self.user_service,
                self.reaction_ledger,
            )

            return ListDiariesResponse(
                diaries=items,
                pagination=Pagination.build(request.page, request.limit, total),
            )
