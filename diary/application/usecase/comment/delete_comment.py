"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from diary.application.usecase.base import BaseUseCase
from diary.domain.model import Actor
from diary.domain.service import CommentService
from diary.domain.value import CommentId, DiaryId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    actor: Actor
    diary_id: UUID
    comment_id: UUID


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    deleted_count: int  # The comment plus its replies


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment (author or diary owner)."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            AuthenticationError: If the actor is a guest
            NotFoundError: If the comment doesn't exist
            ValidationError: If it belongs to another diary
            NotAuthorizedError: If the actor is neither author nor diary owner
        """
        comment_id = CommentId(request.comment_id)
        deleted = await self.comment_service.delete_comment(
            request.actor, DiaryId(request.diary_id), comment_id
        )
        return DeleteCommentResponse(comment_id=str(comment_id), deleted_count=deleted)
