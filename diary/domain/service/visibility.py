"""Visibility gate.

Pure permission predicates over (actor, diary[, comment]). Services call the
``require_*`` helpers before loading anything further or mutating; they raise
AuthenticationError when a guest attempts an authenticated-only action and
NotAuthorizedError when the actor lacks the needed relationship.

Rules:
- read: diary is public, or the actor owns it
- write / moderate: actor owns the diary
- comment / react: diary is public and the actor is authenticated
- edit comment: actor wrote the comment
- delete comment: actor wrote the comment or owns its diary
"""

from typing import Optional

from diary.domain.error import AuthenticationError, NotAuthorizedError
from diary.domain.model import Actor, Authenticated, Comment, Diary


def is_owner(actor: Actor, diary: Diary) -> bool:
    return actor.is_authenticated and diary.is_owned_by(actor.user_id)


def can_read(actor: Actor, diary: Diary) -> bool:
    return diary.is_public or is_owner(actor, diary)


def can_write(actor: Actor, diary: Diary) -> bool:
    return is_owner(actor, diary)


def can_moderate(actor: Actor, diary: Diary) -> bool:
    """Right to delete other users' comments on the diary."""
    return is_owner(actor, diary)


def can_comment(actor: Actor, diary: Diary) -> bool:
    return diary.is_public and actor.is_authenticated


def can_react(actor: Actor, diary: Diary) -> bool:
    """Reacting to a diary or to any comment on it."""
    return diary.is_public and actor.is_authenticated


def can_edit_comment(actor: Actor, comment: Comment) -> bool:
    return actor.is_authenticated and comment.author_id == actor.user_id


def can_delete_comment(
    actor: Actor, comment: Comment, diary: Optional[Diary]
) -> bool:
    if can_edit_comment(actor, comment):
        return True
    return diary is not None and can_moderate(actor, diary)


def require_authenticated(actor: Actor, action: str) -> Authenticated:
    """Return the authenticated actor or raise AuthenticationError."""
    if not isinstance(actor, Authenticated):
        raise AuthenticationError(f"Authentication required to {action}")
    return actor


def require_read(actor: Actor, diary: Diary) -> None:
    if not can_read(actor, diary):
        raise NotAuthorizedError("This diary is private")


def require_write(actor: Actor, diary: Diary, action: str = "update") -> None:
    require_authenticated(actor, f"{action} diaries")
    if not can_write(actor, diary):
        raise NotAuthorizedError(f"Not authorized to {action} this diary")


def require_comment(actor: Actor, diary: Diary) -> None:
    require_authenticated(actor, "comment")
    if not can_comment(actor, diary):
        raise NotAuthorizedError("Cannot comment on a private diary")


def require_react(actor: Actor, diary: Diary) -> None:
    require_authenticated(actor, "react")
    if not can_react(actor, diary):
        raise NotAuthorizedError("Cannot react to a private diary")


def require_edit_comment(actor: Actor, comment: Comment) -> None:
    require_authenticated(actor, "edit comments")
    if not can_edit_comment(actor, comment):
        raise NotAuthorizedError("Not authorized to edit this comment")


def require_delete_comment(
    actor: Actor, comment: Comment, diary: Optional[Diary]
) -> None:
    require_authenticated(actor, "delete comments")
    if not can_delete_comment(actor, comment, diary):
        raise NotAuthorizedError("Not authorized to delete this comment")
