"""Strongly typed identifiers for diary domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
DiaryId = NewType("DiaryId", UUID)
CommentId = NewType("CommentId", UUID)
