"""Comment domain service (thread engine).

Comments are two levels deep: top-level comments on a diary and their
direct replies. Listings page over top-level comments only and attach every
reply underneath its parent.
"""

from collections import defaultdict
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from diary.domain.error import NotFoundError, ValidationError
from diary.domain.model import Actor, Comment, Diary
from diary.domain.model.comment import CONTENT_MAX_LENGTH
from diary.domain.repository import CommentRepository
from diary.domain.value import (
    CommentId,
    DiaryId,
    ReactionTarget,
    ReactionTargetType,
    Reply,
    TopLevel,
)

from . import visibility
from .base import Service
from .diary_service import DiaryService
from .reaction_service import ReactionLedger, ReactionState, parse_emoji


@dataclass
class CommentThread:
    """A top-level comment with its replies, oldest reply first."""

    comment: Comment
    replies: list[Comment]


def clean_comment_content(content: str | None) -> str:
    """Trim and check comment text.

    Raises:
        ValidationError: If the content is empty or too long
    """
    content = (content or "").strip()
    if not content:
        raise ValidationError("Comment content is required")
    if len(content) > CONTENT_MAX_LENGTH:
        raise ValidationError(
            f"Comment cannot be more than {CONTENT_MAX_LENGTH} characters"
        )
    return content


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        diary_service: DiaryService,
        reaction_ledger: ReactionLedger,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            diary_service: Diary service, for loading the parent diary
            reaction_ledger: Reaction ledger
        """
        self.comment_repository = comment_repository
        self.diary_service = diary_service
        self.reaction_ledger = reaction_ledger

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Load a comment.

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        comment = await self.comment_repository.find_by_id(comment_id)
        if not comment:
            logfire.warn("Comment not found", comment_id=str(comment_id))
            raise NotFoundError("Comment", str(comment_id))
        return comment

    def _require_in_diary(self, comment: Comment, diary_id: DiaryId) -> None:
        if comment.diary_id != diary_id:
            logfire.warn(
                "Comment does not belong to diary",
                comment_id=str(comment.id),
                comment_diary_id=str(comment.diary_id),
                diary_id=str(diary_id),
            )
            raise ValidationError("Comment does not belong to this diary")

    async def add_comment(
        self,
        actor: Actor,
        diary_id: DiaryId,
        content: str,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Comment on a public diary or reply to a top-level comment.

        Args:
            actor: Acting user
            diary_id: Diary ID
            content: Comment text
            parent_id: Top-level comment to reply to (None for top-level)

        Returns:
            Created comment

        Raises:
            AuthenticationError: If the actor is a guest
            NotFoundError: If the diary doesn't exist
            NotAuthorizedError: If the diary is private
            ValidationError: If the content is invalid, or the parent is
                missing, in another diary, or itself a reply
        """
        with logfire.span(
            "comment_service.add_comment",
            diary_id=str(diary_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            author = visibility.require_authenticated(actor, "comment")
            diary = await self.diary_service.get_diary(diary_id)
            visibility.require_comment(actor, diary)
            text = clean_comment_content(content)

            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent or parent.diary_id != diary_id:
                    logfire.warn(
                        "Parent comment not found in diary",
                        parent_id=str(parent_id),
                        diary_id=str(diary_id),
                    )
                    raise ValidationError("Parent comment not found in this diary")
                if isinstance(parent.position, Reply):
                    raise ValidationError(
                        "Cannot reply to a reply. Reply to the original comment instead."
                    )

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                diary_id=diary_id,
                author_id=author.user_id,
                content=text,
                parent_id=parent_id,
                created_at=now,
                updated_at=now,
            )
            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                diary_id=str(diary_id),
                author_id=str(author.user_id),
                is_reply=parent_id is not None,
            )
            return saved

    async def list_comments(
        self,
        actor: Actor,
        diary_id: DiaryId,
        limit: int,
        offset: int = 0,
    ) -> tuple[Diary, list[CommentThread], int]:
        """List a page of comment threads on a readable diary.

        Top-level comments are newest first; replies under each are oldest
        first and are loaded in one batch for the whole page.

        Args:
            actor: Acting user or guest
            diary_id: Diary ID
            limit: Page size (top-level comments)
            offset: Number of top-level comments to skip

        Returns:
            Tuple of (diary, threads, total top-level comments)

        Raises:
            NotFoundError: If the diary doesn't exist
            NotAuthorizedError: If it's private and the actor isn't the owner
        """
        with logfire.span(
            "comment_service.list_comments",
            diary_id=str(diary_id),
            limit=limit,
            offset=offset,
        ):
            diary = await self.diary_service.get_readable(actor, diary_id)

            top_level = await self.comment_repository.find_top_level(
                diary_id, limit, offset
            )
            total = await self.comment_repository.count_top_level(diary_id)

            replies_by_parent: dict[CommentId, list[Comment]] = defaultdict(list)
            if top_level:
                replies = await self.comment_repository.find_replies(
                    [c.id for c in top_level]
                )
                for reply in replies:
                    replies_by_parent[reply.parent_id].append(reply)

            threads = [
                CommentThread(comment=c, replies=replies_by_parent.get(c.id, []))
                for c in top_level
            ]
            return diary, threads, total

    async def update_comment(
        self,
        actor: Actor,
        diary_id: DiaryId,
        comment_id: CommentId,
        content: str,
    ) -> Comment:
        """Edit the text of the actor's own comment.

        Raises:
            AuthenticationError: If the actor is a guest
            NotFoundError: If the comment doesn't exist
            ValidationError: If it belongs to another diary or the content
                is invalid
            NotAuthorizedError: If the actor didn't write the comment
        """
        with logfire.span(
            "comment_service.update_comment",
            diary_id=str(diary_id),
            comment_id=str(comment_id),
        ):
            visibility.require_authenticated(actor, "edit comments")
            comment = await self.get_comment(comment_id)
            self._require_in_diary(comment, diary_id)
            visibility.require_edit_comment(actor, comment)
            text = clean_comment_content(content)

            updated = await self.comment_repository.update_content(comment_id, text)
            if not updated:
                raise NotFoundError("Comment", str(comment_id))
            logfire.info("Comment updated", comment_id=str(comment_id))
            return updated

    async def delete_comment(
        self,
        actor: Actor,
        diary_id: DiaryId,
        comment_id: CommentId,
    ) -> int:
        """Delete a comment, its replies, and reactions on all of them.

        The comment's author and the diary owner may delete.

        Returns:
            Number of comments removed (the comment plus its replies)

        Raises:
            AuthenticationError: If the actor is a guest
            NotFoundError: If the comment doesn't exist
            ValidationError: If it belongs to another diary
            NotAuthorizedError: If the actor is neither author nor owner
        """
        with logfire.span(
            "comment_service.delete_comment",
            diary_id=str(diary_id),
            comment_id=str(comment_id),
        ):
            visibility.require_authenticated(actor, "delete comments")
            comment = await self.get_comment(comment_id)
            self._require_in_diary(comment, diary_id)
            diary = await self.comment_diary(comment)
            visibility.require_delete_comment(actor, comment, diary)

            reply_ids: list[CommentId] = []
            if isinstance(comment.position, TopLevel):
                reply_ids = await self.comment_repository.find_reply_ids(comment_id)
            removed_ids = [*reply_ids, comment_id]

            await self.reaction_ledger.purge(ReactionTargetType.COMMENT, removed_ids)
            deleted = await self.comment_repository.delete_many(reply_ids)
            deleted += await self.comment_repository.delete_many([comment_id])

            logfire.info(
                "Comment deleted",
                comment_id=str(comment_id),
                diary_id=str(diary_id),
                deleted=deleted,
                by_owner=comment.author_id != actor.user_id,
            )
            return deleted

    async def comment_diary(self, comment: Comment) -> Optional[Diary]:
        try:
            return await self.diary_service.get_diary(comment.diary_id)
        except NotFoundError:
            return None

    async def react(
        self,
        actor: Actor,
        diary_id: DiaryId,
        comment_id: CommentId,
        emoji: str,
    ) -> ReactionState:
        """Toggle the actor's reaction on a comment of a public diary.

        Raises:
            AuthenticationError: If the actor is a guest
            ValidationError: If the emoji isn't allowed or the comment
                belongs to another diary
            NotFoundError: If the diary or comment doesn't exist
            NotAuthorizedError: If the diary is private
        """
        with logfire.span(
            "comment_service.react",
            diary_id=str(diary_id),
            comment_id=str(comment_id),
        ):
            user = visibility.require_authenticated(actor, "react")
            parsed = parse_emoji(emoji)
            diary = await self.diary_service.get_diary(diary_id)
            comment = await self.get_comment(comment_id)
            self._require_in_diary(comment, diary_id)
            visibility.require_react(actor, diary)

            return await self.reaction_ledger.toggle(
                ReactionTarget(type=ReactionTargetType.COMMENT, id=comment.id),
                user.user_id,
                parsed,
            )
