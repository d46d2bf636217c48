"""React to comment use case."""

from uuid import UUID

from pydantic import BaseModel

from diary.application.usecase.base import BaseUseCase
from diary.application.usecase.common import ReactionStateItem, reaction_state_item
from diary.domain.model import Actor
from diary.domain.service import CommentService
from diary.domain.value import CommentId, DiaryId


class ReactToCommentRequest(BaseModel):
    """React to comment request."""

    actor: Actor
    diary_id: UUID
    comment_id: UUID
    emoji: str | None = None


class ReactToCommentUseCase(BaseUseCase):
    """Use case for toggling a reaction on a comment of a public diary."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize react to comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: ReactToCommentRequest) -> ReactionStateItem:
        """Execute react to comment flow.

        Raises:
            AuthenticationError: If the actor is a guest
            ValidationError: If the emoji isn't allowed or the comment is in
                another diary
            NotFoundError: If the diary or comment doesn't exist
            NotAuthorizedError: If the diary is private
        """
        state = await self.comment_service.react(
            request.actor,
            DiaryId(request.diary_id),
            CommentId(request.comment_id),
            request.emoji,
        )
        return reaction_state_item(state)
