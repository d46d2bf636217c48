"""Get comments use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from diary.application.usecase.base import BaseUseCase
from diary.application.usecase.common import (
    CommentItem,
    Pagination,
    author_info,
    comment_item,
    offset_for,
)
from diary.domain.model import Actor
from diary.domain.service import CommentService, ReactionLedger, UserService
from diary.domain.value import DiaryId, ReactionTargetType


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    actor: Actor
    diary_id: UUID
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    diary_id: str
    comments: list[CommentItem]
    pagination: Pagination


class GetCommentsUseCase(BaseUseCase):
    """Use case for reading a page of comment threads on a diary."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
        reaction_ledger: ReactionLedger,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
            reaction_ledger: Reaction ledger
        """
        self.comment_service = comment_service
        self.user_service = user_service
        self.reaction_ledger = reaction_ledger

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        The diary owner can list comments on a private entry (left from
        when it was public); everyone else needs the entry to be public.
        Pagination counts top-level comments only.

        Raises:
            NotFoundError: If the diary doesn't exist
            NotAuthorizedError: If it's private and the actor isn't the owner
        """
        with logfire.span(
            "get_comments.execute",
            diary_id=str(request.diary_id),
            page=request.page,
            limit=request.limit,
        ):
            diary, threads, total = await self.comment_service.list_comments(
                request.actor,
                DiaryId(request.diary_id),
                request.limit,
                offset_for(request.page, request.limit),
            )

            all_comments = [
                c for thread in threads for c in (thread.comment, *thread.replies)
            ]
            users = await self.user_service.get_users_by_ids(
                [c.author_id for c in all_comments]
            )
            states = await self.reaction_ledger.get_states(
                ReactionTargetType.COMMENT,
                [c.id for c in all_comments],
                request.actor.user_id,
            )

            items = [
                comment_item(
                    thread.comment,
                    author_info(thread.comment.author_id, users),
                    states.get(thread.comment.id),
                    replies=[
                        comment_item(
                            reply,
                            author_info(reply.author_id, users),
                            states.get(reply.id),
                        )
                        for reply in thread.replies
                    ],
                )
                for thread in threads
            ]

            return GetCommentsResponse(
                diary_id=str(diary.id),
                comments=items,
                pagination=Pagination.build(request.page, request.limit, total),
            )
