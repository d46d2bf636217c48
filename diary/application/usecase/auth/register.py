"""Register use case."""

from pydantic import BaseModel

from diary.application.usecase.base import BaseUseCase
from diary.domain.service import AuthService, JWTService


class RegisterRequest(BaseModel):
    """Register request."""

    username: str
    email: str
    password: str
    display_name: str | None = None


class AuthResponse(BaseModel):
    """Authenticated session: the user and a fresh token."""

    user_id: str
    username: str
    email: str
    display_name: str | None
    avatar_url: str | None
    token: str


class RegisterUseCase(BaseUseCase):
    """Use case for creating an account and signing in."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        """Initialize register use case.

        Args:
            auth_service: Authentication domain service
            jwt_service: JWT token domain service
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterRequest) -> AuthResponse:
        """Execute registration.

        Args:
            request: New account details

        Returns:
            The new user with a token

        Raises:
            ValidationError: If any field is malformed
            ConflictError: If the email or username is taken
        """
        user = await self.auth_service.register(
            username=request.username,
            email=request.email,
            password=request.password,
            display_name=request.display_name,
        )
        return AuthResponse(
            user_id=str(user.id),
            username=user.username.root,
            email=user.email.root,
            display_name=user.display_name,
            avatar_url=user.avatar_url,
            token=self.jwt_service.create_token(str(user.id)),
        )
