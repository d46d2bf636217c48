"""Get user profile use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from diary.application.usecase.base import BaseUseCase
from diary.domain.service import UserService
from diary.domain.value import UserId


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    user_id: UUID


class GetUserProfileResponse(BaseModel):
    """Public profile. Email is never exposed here."""

    user_id: str
    username: str
    display_name: str | None
    avatar_url: str | None
    created_at: datetime


class GetUserProfileUseCase(BaseUseCase):
    """Use case for viewing another user's public profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserProfileRequest) -> GetUserProfileResponse:
        """Execute get user profile flow.

        Raises:
            NotFoundError: If the user doesn't exist
        """
        user = await self.user_service.get_by_id(UserId(request.user_id))
        return GetUserProfileResponse(
            user_id=str(user.id),
            username=user.username.root,
            display_name=user.display_name,
            avatar_url=user.avatar_url,
            created_at=user.created_at,
        )
