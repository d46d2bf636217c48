"""Add comment use case."""

from uuid import UUID

from pydantic import BaseModel

from diary.application.usecase.base import BaseUseCase
from diary.application.usecase.common import CommentItem, author_info, comment_item
from diary.domain.model import Actor
from diary.domain.service import CommentService, UserService
from diary.domain.value import CommentId, DiaryId


class AddCommentRequest(BaseModel):
    """Add comment request."""

    actor: Actor
    diary_id: UUID
    content: str | None = None
    parent_id: UUID | None = None  # Top-level comment being replied to


class AddCommentUseCase(BaseUseCase):
    """Use case for commenting on a diary or replying to a comment."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        """Initialize add comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: AddCommentRequest) -> CommentItem:
        """Execute add comment flow.

        Raises:
            AuthenticationError: If the actor is a guest
            NotFoundError: If the diary doesn't exist
            NotAuthorizedError: If the diary is private
            ValidationError: If the content or parent is invalid
        """
        comment = await self.comment_service.add_comment(
            request.actor,
            DiaryId(request.diary_id),
            request.content,
            parent_id=CommentId(request.parent_id) if request.parent_id else None,
        )
        users = await self.user_service.get_users_by_ids([comment.author_id])
        replies = [] if comment.is_top_level else None
        return comment_item(
            comment, author_info(comment.author_id, users), None, replies=replies
        )
