"""Authentication and profile routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel

from diary.application.usecase.auth import (
    AuthResponse,
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
    ResolveActorUseCase,
)
from diary.application.usecase.user import (
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
    UpdateUserProfileRequest,
    UpdateUserProfileUseCase,
)
from diary.interface.api.schema import Envelope, ok
from diary.interface.api.security import BearerCredentials, resolve_actor

router = APIRouter(prefix="/api/auth", tags=["auth"], route_class=DishkaRoute)


class RegisterAPIRequest(BaseModel):
    """API request for registration."""

    username: str
    email: str
    password: str
    display_name: str | None = None


class LoginAPIRequest(BaseModel):
    """API request for login."""

    email: str = ""
    password: str = ""


class UpdateProfileAPIRequest(BaseModel):
    """API request for updating the current user's profile."""

    display_name: str | None = None
    avatar_url: str | None = None


@router.post(
    "/register",
    response_model=Envelope[AuthResponse],
    status_code=status.HTTP_201_CREATED,
)
async def register(
    request: RegisterAPIRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> Envelope[AuthResponse]:
    """Create an account and return a token.

    Fails with 409 if the email or username is taken.
    """
    result = await register_use_case.execute(
        RegisterRequest(
            username=request.username,
            email=request.email,
            password=request.password,
            display_name=request.display_name,
        )
    )
    return ok(result, message="Registration successful")


@router.post("/login", response_model=Envelope[AuthResponse])
async def login(
    request: LoginAPIRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> Envelope[AuthResponse]:
    """Exchange email and password for a token."""
    result = await login_use_case.execute(
        LoginRequest(email=request.email, password=request.password)
    )
    return ok(result, message="Login successful")


@router.get("/me", response_model=Envelope[GetCurrentUserResponse])
async def get_me(
    credentials: BearerCredentials,
    resolve_actor_use_case: FromDishka[ResolveActorUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
) -> Envelope[GetCurrentUserResponse]:
    """Get the authenticated user's account, email included."""
    actor = await resolve_actor(resolve_actor_use_case, credentials, required=True)
    result = await get_current_user_use_case.execute(
        GetCurrentUserRequest(actor=actor)
    )
    return ok(result)


@router.put("/profile", response_model=Envelope[GetCurrentUserResponse])
async def update_profile(
    request: UpdateProfileAPIRequest,
    credentials: BearerCredentials,
    resolve_actor_use_case: FromDishka[ResolveActorUseCase],
    update_user_profile_use_case: FromDishka[UpdateUserProfileUseCase],
) -> Envelope[GetCurrentUserResponse]:
    """Update display name and/or avatar URL."""
    actor = await resolve_actor(resolve_actor_use_case, credentials, required=True)
    result = await update_user_profile_use_case.execute(
        UpdateUserProfileRequest(
            actor=actor,
            display_name=request.display_name,
            avatar_url=request.avatar_url,
        )
    )
    return ok(result, message="Profile updated")


@router.get("/users/{user_id}", response_model=Envelope[GetUserProfileResponse])
async def get_user_profile(
    user_id: UUID,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
) -> Envelope[GetUserProfileResponse]:
    """Get a user's public profile."""
    result = await get_user_profile_use_case.execute(
        GetUserProfileRequest(user_id=user_id)
    )
    return ok(result)
