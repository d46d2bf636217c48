"""Authentication domain service.

Registration and password login. Passwords are stored as bcrypt hashes;
the plaintext never leaves this service.
"""

import asyncio
from datetime import datetime
from uuid import uuid4

import logfire
import pydantic

from diary.config import AuthSettings
from diary.domain.error import AuthenticationError, ConflictError, ValidationError
from diary.domain.model import User
from diary.domain.repository import UserRepository
from diary.domain.value import Email, UserId, Username
from diary.util.password import check_password, hash_password

from .base import Service

INVALID_CREDENTIALS = "Invalid email or password"

# bcrypt only reads the first 72 bytes of a password
PASSWORD_MAX_BYTES = 72


class AuthService(Service):
    """Domain service for registration and login."""

    def __init__(
        self,
        user_repository: UserRepository,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize auth service.

        Args:
            user_repository: User repository
            auth_settings: Authentication settings (bcrypt cost, password rules)
        """
        self.user_repository = user_repository
        self.auth_settings = auth_settings

    async def register(
        self,
        username: str,
        email: str,
        password: str,
        display_name: str | None = None,
    ) -> User:
        """Register a new user.

        Args:
            username: Requested username
            email: Login email (stored lower-cased)
            password: Plaintext password
            display_name: Optional display name, defaults to the username

        Returns:
            Created user

        Raises:
            ValidationError: If any field is malformed
            ConflictError: If the email or username is already registered
        """
        with logfire.span("auth_service.register", username=username):
            try:
                parsed_username = Username(username)
                parsed_email = Email(email)
            except pydantic.ValidationError as e:
                raise ValidationError.from_pydantic(e) from None

            min_length = self.auth_settings.password_min_length
            if len(password) < min_length:
                raise ValidationError(
                    f"Password must be at least {min_length} characters"
                )
            if len(password.encode("utf-8")) > PASSWORD_MAX_BYTES:
                raise ValidationError(
                    f"Password must be at most {PASSWORD_MAX_BYTES} bytes"
                )

            if await self.user_repository.find_by_email(parsed_email):
                logfire.warn("Registration rejected: email taken")
                raise ConflictError("Email already registered")
            if await self.user_repository.find_by_username(parsed_username):
                logfire.warn(
                    "Registration rejected: username taken", username=username
                )
                raise ConflictError("Username already taken")

            password_hash = await asyncio.to_thread(
                hash_password, password, self.auth_settings.bcrypt_rounds
            )

            now = datetime.now()
            try:
                user = User(
                    id=UserId(uuid4()),
                    username=parsed_username,
                    email=parsed_email,
                    password_hash=password_hash,
                    display_name=display_name or parsed_username.root,
                    avatar_url=None,
                    created_at=now,
                    updated_at=now,
                )
            except pydantic.ValidationError as e:
                raise ValidationError.from_pydantic(e) from None

            saved = await self.user_repository.save(user)
            logfire.info(
                "User registered",
                user_id=str(saved.id),
                username=saved.username.root,
            )
            return saved

    async def authenticate(self, email: str, password: str) -> User:
        """Check email and password.

        Unknown email and wrong password fail with the same message.

        Args:
            email: Login email
            password: Plaintext password

        Returns:
            The matching user

        Raises:
            ValidationError: If email or password is missing
            AuthenticationError: If the credentials don't match a user
        """
        with logfire.span("auth_service.authenticate"):
            if not email or not password:
                raise ValidationError("Please provide email and password")

            try:
                parsed_email = Email(email)
            except pydantic.ValidationError:
                raise AuthenticationError(INVALID_CREDENTIALS) from None

            user = await self.user_repository.find_by_email(parsed_email)
            if not user or not await asyncio.to_thread(
                check_password, password, user.password_hash
            ):
                logfire.warn("Login failed")
                raise AuthenticationError(INVALID_CREDENTIALS)

            logfire.info("User logged in", user_id=str(user.id))
            return user
