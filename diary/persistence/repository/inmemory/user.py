"""In-memory user repository for testing."""

from typing import Optional, Sequence

from diary.domain.model import User
from diary.domain.repository import UserRepository
from diary.domain.value import Email, UserId, Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        return [self._users[uid] for uid in user_ids if uid in self._users]

    async def find_by_username(self, username: Username) -> Optional[User]:
        for user in self._users.values():
            if user.username.root == username.root:
                return user
        return None

    async def find_by_email(self, email: Email) -> Optional[User]:
        for user in self._users.values():
            if user.email.root == email.root:
                return user
        return None

    async def save(self, user: User) -> User:
        self._users[user.id] = user
        return user
