"""Domain value objects for the diary service.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum
from uuid import UUID

from pydantic import field_validator

from diary.domain.value.common import RootValueObject, ValueObject
from diary.domain.value.identifiers import CommentId


class Emoji(str, Enum):
    """Allowed reaction emoji, shared by diaries and comments."""

    HEART = "\u2764\ufe0f"
    LAUGH = "\U0001f602"
    WOW = "\U0001f62e"
    SAD = "\U0001f622"
    CLAP = "\U0001f44f"

    @classmethod
    def parse(cls, value: str | None) -> "Emoji":
        """Parse a raw emoji string.

        Raises:
            ValueError: If value is not one of the allowed emoji
        """
        try:
            return cls(value)
        except ValueError:
            allowed = " ".join(e.value for e in cls)
            raise ValueError(f"Invalid emoji. Allowed: {allowed}") from None


class ReactionTargetType(str, Enum):
    """Kind of entity that can hold reactions."""

    DIARY = "diary"
    COMMENT = "comment"


class ReactionTarget(ValueObject):
    """Reference to a reactable entity (diary or comment)."""

    type: ReactionTargetType
    id: UUID


class Username(RootValueObject[str]):
    """Unique public username.

    3-30 characters: letters, digits and underscores.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        v = v.strip()
        if not re.match(r"^[A-Za-z0-9_]{3,30}$", v):
            raise ValueError(
                "Username must be 3-30 characters of letters, digits or underscores"
            )
        return v


class Email(RootValueObject[str]):
    """Unique login email, stored lower-cased."""

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate and normalize email."""
        v = v.strip().lower()
        if len(v) > 255 or not re.match(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", v):
            raise ValueError("Please provide a valid email")
        return v


class TopLevel(ValueObject):
    """Thread position of a comment posted directly on a diary."""

    @property
    def parent_id(self) -> None:
        return None


class Reply(ValueObject):
    """Thread position of a reply to a top-level comment."""

    parent_id: CommentId


ThreadPosition = TopLevel | Reply
