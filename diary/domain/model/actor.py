"""Actor: the identity attempting an operation.

Resolved once per request from the bearer token and passed explicitly into
use cases. A missing or invalid token on an optional-auth route yields Guest.
"""

from diary.domain.model.common import DomainModel
from diary.domain.model.user import User
from diary.domain.value import UserId


class Guest(DomainModel):
    """Unauthenticated visitor."""

    @property
    def user_id(self) -> None:
        return None

    @property
    def is_authenticated(self) -> bool:
        return False


class Authenticated(DomainModel):
    """Actor with a verified token for an existing user."""

    user: User

    @property
    def user_id(self) -> UserId:
        return self.user.id

    @property
    def is_authenticated(self) -> bool:
        return True


Actor = Guest | Authenticated

GUEST = Guest()
