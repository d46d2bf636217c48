"""Diary routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, status
from pydantic import BaseModel, ConfigDict, Field

from diary.application.usecase.auth import ResolveActorUseCase
from diary.application.usecase.common import DiaryItem, ReactionStateItem
from diary.application.usecase.diary import (
    CreateDiaryRequest,
    CreateDiaryUseCase,
    DeleteDiaryRequest,
    DeleteDiaryResponse,
    DeleteDiaryUseCase,
    GetDiaryRequest,
    GetDiaryUseCase,
    ListMyDiariesRequest,
    ListMyDiariesUseCase,
    ListPublicDiariesRequest,
    ListPublicDiariesUseCase,
    ReactToDiaryRequest,
    ReactToDiaryUseCase,
    ToggleVisibilityRequest,
    ToggleVisibilityUseCase,
    UpdateDiaryRequest,
    UpdateDiaryUseCase,
)
from diary.config import PaginationSettings
from diary.interface.api.schema import Envelope, ok
from diary.interface.api.security import BearerCredentials, resolve_actor

router = APIRouter(prefix="/api/diaries", tags=["diaries"], route_class=DishkaRoute)


class CreateDiaryAPIRequest(BaseModel):
    """API request for creating a diary.

    Accepts both ``is_public`` and the camelCase ``isPublic``.
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str = ""
    content: str = ""
    is_public: bool = Field(default=False, alias="isPublic")
    tags: list[str] = []


class UpdateDiaryAPIRequest(BaseModel):
    """API request for updating a diary. Omitted fields are unchanged."""

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = None
    content: str | None = None
    is_public: bool | None = Field(default=None, alias="isPublic")
    tags: list[str] | None = None


class ReactAPIRequest(BaseModel):
    """API request for toggling a reaction."""

    emoji: str | None = None


@router.post(
    "", response_model=Envelope[DiaryItem], status_code=status.HTTP_201_CREATED
)
async def create_diary(
    request: CreateDiaryAPIRequest,
    credentials: BearerCredentials,
    resolve_actor_use_case: FromDishka[ResolveActorUseCase],
    create_diary_use_case: FromDishka[CreateDiaryUseCase],
) -> Envelope[DiaryItem]:
    """Write a new diary entry. Entries are private unless is_public is set."""
    actor = await resolve_actor(resolve_actor_use_case, credentials, required=True)
    result = await create_diary_use_case.execute(
        CreateDiaryRequest(
            actor=actor,
            title=request.title,
            content=request.content,
            is_public=request.is_public,
            tags=request.tags,
        )
    )
    return ok(result, message="Diary created successfully")


@router.get("/my", response_model=Envelope[list[DiaryItem]])
async def list_my_diaries(
    credentials: BearerCredentials,
    resolve_actor_use_case: FromDishka[ResolveActorUseCase],
    list_my_diaries_use_case: FromDishka[ListMyDiariesUseCase],
    pagination: FromDishka[PaginationSettings],
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1, le=100),
    is_public: bool | None = Query(default=None),
    is_public_camel: bool | None = Query(default=None, alias="isPublic"),
    search: str | None = Query(default=None),
) -> Envelope[list[DiaryItem]]:
    """List the caller's own diaries, newest first."""
    actor = await resolve_actor(resolve_actor_use_case, credentials, required=True)
    result = await list_my_diaries_use_case.execute(
        ListMyDiariesRequest(
            actor=actor,
            is_public=is_public if is_public is not None else is_public_camel,
            search=search,
            page=page,
            limit=limit or pagination.diary_page_size,
        )
    )
    return ok(result.diaries, pagination=result.pagination)


@router.get("/public", response_model=Envelope[list[DiaryItem]])
async def list_public_diaries(
    credentials: BearerCredentials,
    resolve_actor_use_case: FromDishka[ResolveActorUseCase],
    list_public_diaries_use_case: FromDishka[ListPublicDiariesUseCase],
    pagination: FromDishka[PaginationSettings],
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1, le=100),
    search: str | None = Query(default=None),
) -> Envelope[list[DiaryItem]]:
    """Public feed, newest first. Never includes private entries."""
    actor = await resolve_actor(resolve_actor_use_case, credentials, required=False)
    result = await list_public_diaries_use_case.execute(
        ListPublicDiariesRequest(
            actor=actor,
            search=search,
            page=page,
            limit=limit or pagination.diary_page_size,
        )
    )
    return ok(result.diaries, pagination=result.pagination)


@router.get("/{diary_id}", response_model=Envelope[DiaryItem])
async def get_diary(
    diary_id: UUID,
    credentials: BearerCredentials,
    resolve_actor_use_case: FromDishka[ResolveActorUseCase],
    get_diary_use_case: FromDishka[GetDiaryUseCase],
) -> Envelope[DiaryItem]:
    """Read a diary. Private entries are visible to their owner only."""
    actor = await resolve_actor(resolve_actor_use_case, credentials, required=False)
    result = await get_diary_use_case.execute(
        GetDiaryRequest(actor=actor, diary_id=diary_id)
    )
    return ok(result)


@router.put("/{diary_id}", response_model=Envelope[DiaryItem])
async def update_diary(
    diary_id: UUID,
    request: UpdateDiaryAPIRequest,
    credentials: BearerCredentials,
    resolve_actor_use_case: FromDishka[ResolveActorUseCase],
    update_diary_use_case: FromDishka[UpdateDiaryUseCase],
) -> Envelope[DiaryItem]:
    """Edit a diary (owner only)."""
    actor = await resolve_actor(resolve_actor_use_case, credentials, required=True)
    result = await update_diary_use_case.execute(
        UpdateDiaryRequest(
            actor=actor,
            diary_id=diary_id,
            title=request.title,
            content=request.content,
            is_public=request.is_public,
            tags=request.tags,
        )
    )
    return ok(result, message="Diary updated successfully")


@router.delete("/{diary_id}", response_model=Envelope[DeleteDiaryResponse])
async def delete_diary(
    diary_id: UUID,
    credentials: BearerCredentials,
    resolve_actor_use_case: FromDishka[ResolveActorUseCase],
    delete_diary_use_case: FromDishka[DeleteDiaryUseCase],
) -> Envelope[DeleteDiaryResponse]:
    """Delete a diary with all its comments and reactions (owner only)."""
    actor = await resolve_actor(resolve_actor_use_case, credentials, required=True)
    result = await delete_diary_use_case.execute(
        DeleteDiaryRequest(actor=actor, diary_id=diary_id)
    )
    return ok(result, message="Diary deleted successfully")


@router.patch("/{diary_id}/toggle-visibility", response_model=Envelope[DiaryItem])
async def toggle_visibility(
    diary_id: UUID,
    credentials: BearerCredentials,
    resolve_actor_use_case: FromDishka[ResolveActorUseCase],
    toggle_visibility_use_case: FromDishka[ToggleVisibilityUseCase],
) -> Envelope[DiaryItem]:
    """Flip a diary between public and private (owner only)."""
    actor = await resolve_actor(resolve_actor_use_case, credentials, required=True)
    result = await toggle_visibility_use_case.execute(
        ToggleVisibilityRequest(actor=actor, diary_id=diary_id)
    )
    return ok(result.diary, message=result.message)


@router.post("/{diary_id}/react", response_model=Envelope[ReactionStateItem])
async def react_to_diary(
    diary_id: UUID,
    request: ReactAPIRequest,
    credentials: BearerCredentials,
    resolve_actor_use_case: FromDishka[ResolveActorUseCase],
    react_to_diary_use_case: FromDishka[ReactToDiaryUseCase],
) -> Envelope[ReactionStateItem]:
    """Toggle the caller's reaction on a public diary.

    Sending the emoji the caller already holds removes it.
    """
    actor = await resolve_actor(resolve_actor_use_case, credentials, required=True)
    result = await react_to_diary_use_case.execute(
        ReactToDiaryRequest(actor=actor, diary_id=diary_id, emoji=request.emoji)
    )
    return ok(result)
