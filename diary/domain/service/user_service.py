"""User domain service."""

from datetime import datetime
from typing import Sequence

import logfire
import pydantic

from diary.domain.error import NotFoundError, ValidationError
from diary.domain.model import User
from diary.domain.repository import UserRepository
from diary.domain.value import UserId

from .base import Service


class UserService(Service):
    """Domain service for user lookups and profile edits."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def find_by_id(self, user_id: UserId) -> User | None:
        return await self.user_repository.find_by_id(user_id)

    async def get_users_by_ids(self, user_ids: Sequence[UserId]) -> dict[UserId, User]:
        """Batch-load users, e.g. the authors shown on a listing page.

        Args:
            user_ids: User IDs (duplicates allowed)

        Returns:
            Mapping of user ID to user; unknown IDs are absent
        """
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}
        users = await self.user_repository.find_by_ids(unique_ids)
        return {user.id: user for user in users}

    async def update_profile(
        self,
        user: User,
        display_name: str | None = None,
        avatar_url: str | None = None,
    ) -> User:
        """Update the editable profile fields.

        Fields left as None keep their current value.

        Args:
            user: The user editing their own profile
            display_name: New display name
            avatar_url: New avatar URL

        Returns:
            Updated user

        Raises:
            ValidationError: If the display name is too long
        """
        with logfire.span("user_service.update_profile", user_id=str(user.id)):
            updates: dict = {"updated_at": datetime.now()}
            if display_name is not None:
                updates["display_name"] = display_name.strip() or user.username.root
            if avatar_url is not None:
                updates["avatar_url"] = avatar_url or None

            try:
                updated = User.model_validate(user.model_dump() | updates)
            except pydantic.ValidationError as e:
                raise ValidationError.from_pydantic(e) from None

            saved = await self.user_repository.save(updated)
            logfire.info("Profile updated", user_id=str(user.id))
            return saved
