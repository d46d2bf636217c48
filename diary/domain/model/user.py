"""User aggregate root.

Users register with username/email/password and own diary entries.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from diary.domain.model.common import DomainModel
from diary.domain.value import Email, UserId, Username


class User(DomainModel):
    """User aggregate root.

    The id, username and email never change after registration;
    display name and avatar are editable from the profile page.
    """

    id: UserId
    username: Username
    email: Email
    password_hash: str = Field(repr=False)
    display_name: Optional[str] = Field(default=None, max_length=100)
    avatar_url: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
