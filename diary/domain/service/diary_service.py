"""Diary domain service (entry store)."""

from datetime import datetime
from typing import Optional, Sequence
from uuid import uuid4

import logfire
import pydantic

from diary.domain.error import NotFoundError, ValidationError
from diary.domain.model import Actor, Diary
from diary.domain.model.diary import TITLE_MAX_LENGTH
from diary.domain.repository import CommentRepository, DiaryFilter, DiaryRepository
from diary.domain.value import DiaryId, ReactionTarget, ReactionTargetType

from . import visibility
from .base import Service
from .reaction_service import ReactionLedger, ReactionState, parse_emoji


def clean_title(title: str | None) -> str:
    """Trim and check a diary title.

    Raises:
        ValidationError: If the title is empty or too long
    """
    title = (title or "").strip()
    if not title:
        raise ValidationError("Title is required")
    if len(title) > TITLE_MAX_LENGTH:
        raise ValidationError(
            f"Title cannot be more than {TITLE_MAX_LENGTH} characters"
        )
    return title


def clean_content(content: str | None) -> str:
    """Check diary content is present. Whitespace inside is kept."""
    if not content or not content.strip():
        raise ValidationError("Content is required")
    return content


def clean_tags(tags: Sequence[str] | None) -> list[str]:
    """Trim tags and drop empty ones, keeping order."""
    if not tags:
        return []
    return [tag.strip() for tag in tags if tag and tag.strip()]


class DiaryService(Service):
    """Domain service for diary entries.

    Every operation takes the acting user and applies the visibility rules
    before it mutates anything.
    """

    def __init__(
        self,
        diary_repository: DiaryRepository,
        comment_repository: CommentRepository,
        reaction_ledger: ReactionLedger,
    ) -> None:
        """Initialize diary service.

        Args:
            diary_repository: Diary repository
            comment_repository: Comment repository (cascade deletes, counts)
            reaction_ledger: Reaction ledger
        """
        self.diary_repository = diary_repository
        self.comment_repository = comment_repository
        self.reaction_ledger = reaction_ledger

    async def create_diary(
        self,
        actor: Actor,
        title: str,
        content: str,
        is_public: bool = False,
        tags: Sequence[str] | None = None,
    ) -> Diary:
        """Create a diary owned by the actor.

        Args:
            actor: Acting user (must be authenticated)
            title: Entry title
            content: Entry body
            is_public: Publish immediately
            tags: Optional tags

        Returns:
            Created diary

        Raises:
            AuthenticationError: If the actor is a guest
            ValidationError: If title or content is invalid
        """
        owner = visibility.require_authenticated(actor, "create diaries")
        with logfire.span("diary_service.create_diary", author_id=str(owner.user_id)):
            now = datetime.now()
            diary = Diary(
                id=DiaryId(uuid4()),
                title=clean_title(title),
                content=clean_content(content),
                author_id=owner.user_id,
                is_public=is_public,
                tags=clean_tags(tags),
                created_at=now,
                updated_at=now,
            )
            saved = await self.diary_repository.save(diary)
            logfire.info(
                "Diary created",
                diary_id=str(saved.id),
                author_id=str(saved.author_id),
                is_public=saved.is_public,
            )
            return saved

    async def get_diary(self, diary_id: DiaryId) -> Diary:
        """Load a diary without any permission check.

        Raises:
            NotFoundError: If the diary doesn't exist
        """
        diary = await self.diary_repository.find_by_id(diary_id)
        if not diary:
            logfire.warn("Diary not found", diary_id=str(diary_id))
            raise NotFoundError("Diary", str(diary_id))
        return diary

    async def get_readable(self, actor: Actor, diary_id: DiaryId) -> Diary:
        """Load a diary the actor may read.

        Args:
            actor: Acting user or guest
            diary_id: Diary ID

        Returns:
            The diary

        Raises:
            NotFoundError: If the diary doesn't exist
            NotAuthorizedError: If it's private and the actor isn't the owner
        """
        with logfire.span("diary_service.get_readable", diary_id=str(diary_id)):
            diary = await self.get_diary(diary_id)
            visibility.require_read(actor, diary)
            return diary

    async def update_diary(
        self,
        actor: Actor,
        diary_id: DiaryId,
        title: Optional[str] = None,
        content: Optional[str] = None,
        is_public: Optional[bool] = None,
        tags: Optional[Sequence[str]] = None,
    ) -> Diary:
        """Apply a partial update. Fields left as None are untouched.

        Args:
            actor: Acting user
            diary_id: Diary ID
            title: New title
            content: New content
            is_public: New visibility
            tags: New tags (replaces the list)

        Returns:
            Updated diary

        Raises:
            AuthenticationError: If the actor is a guest
            NotFoundError: If the diary doesn't exist
            NotAuthorizedError: If the actor doesn't own the diary
            ValidationError: If a provided field is invalid
        """
        with logfire.span("diary_service.update_diary", diary_id=str(diary_id)):
            visibility.require_authenticated(actor, "update diaries")
            diary = await self.get_diary(diary_id)
            visibility.require_write(actor, diary, "update")

            updates: dict = {"updated_at": datetime.now()}
            if title is not None:
                updates["title"] = clean_title(title)
            if content is not None:
                updates["content"] = clean_content(content)
            if is_public is not None:
                updates["is_public"] = is_public
            if tags is not None:
                updates["tags"] = clean_tags(tags)

            try:
                updated = Diary.model_validate(diary.model_dump() | updates)
            except pydantic.ValidationError as e:
                raise ValidationError.from_pydantic(e) from None

            saved = await self.diary_repository.save(updated)
            logfire.info(
                "Diary updated",
                diary_id=str(diary_id),
                fields=sorted(k for k in updates if k != "updated_at"),
            )
            return saved

    async def toggle_visibility(self, actor: Actor, diary_id: DiaryId) -> Diary:
        """Flip a diary between public and private.

        Raises:
            AuthenticationError: If the actor is a guest
            NotFoundError: If the diary doesn't exist
            NotAuthorizedError: If the actor doesn't own the diary
        """
        with logfire.span("diary_service.toggle_visibility", diary_id=str(diary_id)):
            visibility.require_authenticated(actor, "update diaries")
            diary = await self.get_diary(diary_id)
            visibility.require_write(actor, diary, "update")

            updated = diary.model_copy(
                update={"is_public": not diary.is_public, "updated_at": datetime.now()}
            )
            saved = await self.diary_repository.save(updated)
            logfire.info(
                "Diary visibility toggled",
                diary_id=str(diary_id),
                is_public=saved.is_public,
            )
            return saved

    async def delete_diary(self, actor: Actor, diary_id: DiaryId) -> None:
        """Delete a diary with its comments and every reaction under it.

        Children go first: reactions on comments, comments, reactions on
        the diary, then the diary. All of it runs in the caller's
        transaction.

        Raises:
            AuthenticationError: If the actor is a guest
            NotFoundError: If the diary doesn't exist
            NotAuthorizedError: If the actor doesn't own the diary
        """
        with logfire.span("diary_service.delete_diary", diary_id=str(diary_id)):
            visibility.require_authenticated(actor, "delete diaries")
            diary = await self.get_diary(diary_id)
            visibility.require_write(actor, diary, "delete")

            comment_ids = await self.comment_repository.find_ids_by_diary(diary_id)
            await self.reaction_ledger.purge(ReactionTargetType.COMMENT, comment_ids)
            deleted_comments = await self.comment_repository.delete_many(comment_ids)
            await self.reaction_ledger.purge(ReactionTargetType.DIARY, [diary_id])
            await self.diary_repository.delete(diary_id)

            logfire.info(
                "Diary deleted",
                diary_id=str(diary_id),
                deleted_comments=deleted_comments,
            )

    async def list_diaries(
        self,
        filter: DiaryFilter,
        limit: int,
        offset: int = 0,
    ) -> tuple[list[Diary], int]:
        """List diaries matching a filter, newest first.

        Callers build the filter; public listings must set is_public=True.

        Args:
            filter: Listing criteria
            limit: Page size
            offset: Number of diaries to skip

        Returns:
            Tuple of (page of diaries, total matching count)
        """
        with logfire.span(
            "diary_service.list_diaries",
            author_id=str(filter.author_id) if filter.author_id else None,
            is_public=filter.is_public,
            search=filter.search,
            limit=limit,
            offset=offset,
        ):
            diaries = await self.diary_repository.find_all(filter, limit, offset)
            total = await self.diary_repository.count(filter)
            return diaries, total

    async def comment_counts(self, diary_ids: Sequence[DiaryId]) -> dict[DiaryId, int]:
        """Comment count per diary, top-level comments and replies together."""
        if not diary_ids:
            return {}
        counts = await self.comment_repository.count_by_diaries(diary_ids)
        return {diary_id: counts.get(diary_id, 0) for diary_id in diary_ids}

    async def react(
        self, actor: Actor, diary_id: DiaryId, emoji: str
    ) -> ReactionState:
        """Toggle the actor's reaction on a public diary.

        Args:
            actor: Acting user
            diary_id: Diary ID
            emoji: Raw emoji from the request

        Returns:
            Reaction state after the toggle

        Raises:
            AuthenticationError: If the actor is a guest
            ValidationError: If the emoji isn't allowed
            NotFoundError: If the diary doesn't exist
            NotAuthorizedError: If the diary is private
        """
        with logfire.span("diary_service.react", diary_id=str(diary_id)):
            user = visibility.require_authenticated(actor, "react")
            parsed = parse_emoji(emoji)
            diary = await self.get_diary(diary_id)
            visibility.require_react(actor, diary)

            return await self.reaction_ledger.toggle(
                ReactionTarget(type=ReactionTargetType.DIARY, id=diary.id),
                user.user_id,
                parsed,
            )
