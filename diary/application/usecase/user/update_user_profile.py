"""Update user profile use case."""

from pydantic import BaseModel

from diary.application.usecase.auth import GetCurrentUserResponse
from diary.application.usecase.base import BaseUseCase
from diary.domain.model import Actor
from diary.domain.service import UserService
from diary.domain.service.visibility import require_authenticated


class UpdateUserProfileRequest(BaseModel):
    """Update user profile request."""

    actor: Actor
    display_name: str | None = None
    avatar_url: str | None = None


class UpdateUserProfileUseCase(BaseUseCase):
    """Use case for updating the current user's profile.

    Only display name and avatar URL are editable; username and email are
    fixed at registration.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize update user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(
        self, request: UpdateUserProfileRequest
    ) -> GetCurrentUserResponse:
        """Execute update user profile flow.

        Raises:
            AuthenticationError: If the actor is a guest
            ValidationError: If a field is invalid
        """
        actor = require_authenticated(request.actor, "update your profile")
        user = await self.user_service.get_by_id(actor.user_id)
        updated = await self.user_service.update_profile(
            user,
            display_name=request.display_name,
            avatar_url=request.avatar_url,
        )
        return GetCurrentUserResponse(
            user_id=str(updated.id),
            username=updated.username.root,
            email=updated.email.root,
            display_name=updated.display_name,
            avatar_url=updated.avatar_url,
            created_at=updated.created_at,
            updated_at=updated.updated_at,
        )
