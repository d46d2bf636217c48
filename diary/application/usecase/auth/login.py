"""Login use case."""

from pydantic import BaseModel

from diary.application.usecase.base import BaseUseCase
from diary.domain.service import AuthService, JWTService

from .register import AuthResponse


class LoginRequest(BaseModel):
    """Login request."""

    email: str
    password: str


class LoginUseCase(BaseUseCase):
    """Use case for password login."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            auth_service: Authentication domain service
            jwt_service: JWT token domain service
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> AuthResponse:
        """Execute login.

        Raises:
            ValidationError: If email or password is missing
            AuthenticationError: If the credentials are wrong
        """
        user = await self.auth_service.authenticate(request.email, request.password)
        return AuthResponse(
            user_id=str(user.id),
            username=user.username.root,
            email=user.email.root,
            display_name=user.display_name,
            avatar_url=user.avatar_url,
            token=self.jwt_service.create_token(str(user.id)),
        )
