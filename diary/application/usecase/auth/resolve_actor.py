"""Resolve actor use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from diary.application.usecase.base import BaseUseCase
from diary.domain.error import AuthenticationError
from diary.domain.model import GUEST, Actor, Authenticated
from diary.domain.service import JWTService, UserService
from diary.domain.value import UserId
from diary.util.jwt import JWTError


class ResolveActorRequest(BaseModel):
    """Resolve actor request."""

    token: str | None = None  # Bearer token, if the request carried one
    required: bool = False  # Fail instead of falling back to Guest


class ResolveActorUseCase(BaseUseCase):
    """Turn an optional bearer token into the request's Actor."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize resolve actor use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: ResolveActorRequest) -> Actor:
        """Execute actor resolution.

        A missing token, an invalid or expired token, and a token for a
        deleted user all yield Guest, unless the route requires
        authentication, in which case they raise.

        Args:
            request: Token and whether authentication is required

        Returns:
            Guest or Authenticated actor

        Raises:
            AuthenticationError: If required and the token doesn't resolve
        """
        if not request.token:
            if request.required:
                raise AuthenticationError("Not authorized, no token")
            return GUEST

        try:
            payload = self.jwt_service.verify_token(request.token)
            user_id = UserId(UUID(payload.user_id))
        except (JWTError, ValueError):
            if request.required:
                raise AuthenticationError("Not authorized, token failed") from None
            return GUEST

        user = await self.user_service.find_by_id(user_id)
        if not user:
            logfire.warn("Token for unknown user", user_id=str(user_id))
            if request.required:
                raise AuthenticationError("Not authorized, user not found")
            return GUEST

        return Authenticated(user=user)
