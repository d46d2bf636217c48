"""List public diaries use case."""

import logfire
from pydantic import BaseModel, Field

from diary.application.usecase.base import BaseUseCase
from diary.application.usecase.common import (
    DiaryItem,
    Pagination,
    author_info,
    diary_item,
    offset_for,
)
from diary.domain.model import Actor, Diary
from diary.domain.repository import DiaryFilter
from diary.domain.service import DiaryService, ReactionLedger, UserService
from diary.domain.value import ReactionTargetType


class ListPublicDiariesRequest(BaseModel):
    """List public diaries request."""

    actor: Actor
    search: str | None = None  # Case-insensitive title substring
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)


class ListDiariesResponse(BaseModel):
    """A page of diaries."""

    diaries: list[DiaryItem]
    pagination: Pagination


async def present_diaries(
    diaries: list[Diary],
    actor: Actor,
    diary_service: DiaryService,
    user_service: UserService,
    reaction_ledger: ReactionLedger,
) -> list[DiaryItem]:
    """Attach authors, reactions and comment counts to a page of diaries.

    One batch query per concern, whatever the page size.
    """
    diary_ids = [d.id for d in diaries]
    users = await user_service.get_users_by_ids([d.author_id for d in diaries])
    states = await reaction_ledger.get_states(
        ReactionTargetType.DIARY, diary_ids, actor.user_id
    )
    counts = await diary_service.comment_counts(diary_ids)

    return [
        diary_item(
            d,
            author_info(d.author_id, users),
            states.get(d.id),
            comment_count=counts.get(d.id, 0),
        )
        for d in diaries
    ]


class ListPublicDiariesUseCase(BaseUseCase):
    """Use case for the public feed."""

    def __init__(
        self,
        diary_service: DiaryService,
        user_service: UserService,
        reaction_ledger: ReactionLedger,
    ) -> None:
        """Initialize list public diaries use case.

        Args:
            diary_service: Diary domain service
            user_service: User domain service
            reaction_ledger: Reaction ledger
        """
        self.diary_service = diary_service
        self.user_service = user_service
        self.reaction_ledger = reaction_ledger

    async def execute(self, request: ListPublicDiariesRequest) -> ListDiariesResponse:
        """Execute public feed listing. Private entries never appear.

        Args:
            request: Search and pagination

        Returns:
            Newest public diaries first, with comment counts
        """
        with logfire.span(
            "list_public_diaries.execute",
            search=request.search,
            page=request.page,
            limit=request.limit,
        ):
            filter = DiaryFilter(is_public=True, search=request.search or None)
            diaries, total = await self.diary_service.list_diaries(
                filter, request.limit, offset_for(request.page, request.limit)
            )
            items = await present_diaries(
                diaries,
                request.actor,
                self.diary_service,
                self.user_service,
                self.reaction_ledger,
            )
            logfire.info("Public diaries listed", count=len(items), total=total)

            return ListDiariesResponse(
                diaries=items,
                pagination=Pagination.build(request.page, request.limit, total),
            )
