"""Comment routes, nested under a diary."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, status
from pydantic import BaseModel, ConfigDict, Field

from diary.application.usecase.auth import ResolveActorUseCase
from diary.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
    ReactToCommentRequest,
    ReactToCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from diary.application.usecase.common import CommentItem, ReactionStateItem
from diary.config import PaginationSettings
from diary.interface.api.routes.diaries import ReactAPIRequest
from diary.interface.api.schema import Envelope, ok
from diary.interface.api.security import BearerCredentials, resolve_actor

router = APIRouter(
    prefix="/api/diaries/{diary_id}/comments",
    tags=["comments"],
    route_class=DishkaRoute,
)


class AddCommentAPIRequest(BaseModel):
    """API request for adding a comment or reply."""

    model_config = ConfigDict(populate_by_name=True)

    content: str | None = None
    # Set to reply to a top-level comment
    parent_comment: UUID | None = Field(default=None, alias="parentComment")


class UpdateCommentAPIRequest(BaseModel):
    """API request for editing a comment."""

    content: str | None = None


@router.get("", response_model=Envelope[list[CommentItem]])
async def get_comments(
    diary_id: UUID,
    credentials: BearerCredentials,
    resolve_actor_use_case: FromDishka[ResolveActorUseCase],
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    pagination: FromDishka[PaginationSettings],
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1, le=100),
) -> Envelope[list[CommentItem]]:
    """List comment threads: top-level newest first, replies oldest first."""
    actor = await resolve_actor(resolve_actor_use_case, credentials, required=False)
    result = await get_comments_use_case.execute(
        GetCommentsRequest(
            actor=actor,
            diary_id=diary_id,
            page=page,
            limit=limit or pagination.comment_page_size,
        )
    )
    return ok(result.comments, pagination=result.pagination)


@router.post(
    "", response_model=Envelope[CommentItem], status_code=status.HTTP_201_CREATED
)
async def add_comment(
    diary_id: UUID,
    request: AddCommentAPIRequest,
    credentials: BearerCredentials,
    resolve_actor_use_case: FromDishka[ResolveActorUseCase],
    add_comment_use_case: FromDishka[AddCommentUseCase],
) -> Envelope[CommentItem]:
    """Comment on a public diary, or reply to one of its top-level comments."""
    actor = await resolve_actor(resolve_actor_use_case, credentials, required=True)
    result = await add_comment_use_case.execute(
        AddCommentRequest(
            actor=actor,
            diary_id=diary_id,
            content=request.content,
            parent_id=request.parent_comment,
        )
    )
    message = "Reply added successfully" if result.parent_id else "Comment added successfully"
    return ok(result, message=message)


@router.put("/{comment_id}", response_model=Envelope[CommentItem])
async def update_comment(
    diary_id: UUID,
    comment_id: UUID,
    request: UpdateCommentAPIRequest,
    credentials: BearerCredentials,
    resolve_actor_use_case: FromDishka[ResolveActorUseCase],
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
) -> Envelope[CommentItem]:
    """Edit a comment (author only)."""
    actor = await resolve_actor(resolve_actor_use_case, credentials, required=True)
    result = await update_comment_use_case.execute(
        UpdateCommentRequest(
            actor=actor,
            diary_id=diary_id,
            comment_id=comment_id,
            content=request.content,
        )
    )
    return ok(result, message="Comment updated successfully")


@router.delete("/{comment_id}", response_model=Envelope[DeleteCommentResponse])
async def delete_comment(
    diary_id: UUID,
    comment_id: UUID,
    credentials: BearerCredentials,
    resolve_actor_use_case: FromDishka[ResolveActorUseCase],
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
) -> Envelope[DeleteCommentResponse]:
    """Delete a comment and its replies (author or diary owner)."""
    actor = await resolve_actor(resolve_actor_use_case, credentials, required=True)
    result = await delete_comment_use_case.execute(
        DeleteCommentRequest(actor=actor, diary_id=diary_id, comment_id=comment_id)
    )
    return ok(result, message="Comment deleted successfully")


@router.post("/{comment_id}/react", response_model=Envelope[ReactionStateItem])
async def react_to_comment(
    diary_id: UUID,
    comment_id: UUID,
    request: ReactAPIRequest,
    credentials: BearerCredentials,
    resolve_actor_use_case: FromDishka[ResolveActorUseCase],
    react_to_comment_use_case: FromDishka[ReactToCommentUseCase],
) -> Envelope[ReactionStateItem]:
    """Toggle the caller's reaction on a comment of a public diary."""
    actor = await resolve_actor(resolve_actor_use_case, credentials, required=True)
    result = await react_to_comment_use_case.execute(
        ReactToCommentRequest(
            actor=actor,
            diary_id=diary_id,
            comment_id=comment_id,
            emoji=request.emoji,
        )
    )
    return ok(result)
