"""Get current user use case."""

from datetime import datetime

from pydantic import BaseModel

from diary.application.usecase.base import BaseUseCase
from diary.domain.model import Actor
from diary.domain.service import UserService
from diary.domain.service.visibility import require_authenticated


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    actor: Actor


class GetCurrentUserResponse(BaseModel):
    """Get current user response (private view, includes email)."""

    user_id: str
    username: str
    email: str
    display_name: str | None
    avatar_url: str | None
    created_at: datetime
    updated_at: datetime


class GetCurrentUserUseCase(BaseUseCase):
    """Use case for getting the current authenticated user."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Raises:
            AuthenticationError: If the actor is a guest
            NotFoundError: If the user was deleted
        """
        actor = require_authenticated(request.actor, "view your account")
        user = await self.user_service.get_by_id(actor.user_id)

        return GetCurrentUserResponse(
            user_id=str(user.id),
            username=user.username.root,
            email=user.email.root,
            display_name=user.display_name,
            avatar_url=user.avatar_url,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
