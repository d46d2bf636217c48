"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel

from diary.application.usecase.base import BaseUseCase
from diary.application.usecase.common import CommentItem, author_info, comment_item
from diary.domain.model import Actor
from diary.domain.service import CommentService, ReactionLedger, UserService
from diary.domain.value import CommentId, DiaryId, ReactionTarget, ReactionTargetType


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    actor: Actor
    diary_id: UUID
    comment_id: UUID
    content: str | None = None


class UpdateCommentUseCase(BaseUseCase):
    """Use case for editing a comment.

    Only the comment's author may edit it. The diary and thread position
    never change.
    """

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
        reaction_ledger: ReactionLedger,
    ) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
            reaction_ledger: Reaction ledger
        """
        self.comment_service = comment_service
        self.user_service = user_service
        self.reaction_ledger = reaction_ledger

    async def execute(self, request: UpdateCommentRequest) -> CommentItem:
        """Execute update comment flow.

        Raises:
            AuthenticationError: If the actor is a guest
            NotFoundError: If the comment doesn't exist
            ValidationError: If it belongs to another diary or the content
                is invalid
            NotAuthorizedError: If the actor didn't write the comment
        """
        comment = await self.comment_service.update_comment(
            request.actor,
            DiaryId(request.diary_id),
            CommentId(request.comment_id),
            request.content,
        )
        users = await self.user_service.get_users_by_ids([comment.author_id])
        state = await self.reaction_ledger.get_state(
            ReactionTarget(type=ReactionTargetType.COMMENT, id=comment.id),
            request.actor.user_id,
        )
        return comment_item(comment, author_info(comment.author_id, users), state)
