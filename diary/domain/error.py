"""Domain layer errors.

Every core operation either returns a value or raises exactly one of these.
The interface layer maps each kind to an HTTP status.
"""

import pydantic


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Malformed or semantically invalid input."""

    @classmethod
    def from_pydantic(cls, exc: pydantic.ValidationError) -> "ValidationError":
        """Build from a pydantic error, keeping only the first message."""
        errors = exc.errors()
        if not errors:
            return cls(str(exc))
        message = str(errors[0].get("msg", "Invalid input"))
        return cls(message.removeprefix("Value error, "))


class AuthenticationError(DomainError):
    """Operation needs an authenticated actor and none was supplied."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class NotAuthorizedError(DomainError):
    """Actor lacks the required relationship to the target."""

    def __init__(self, message: str):
        super().__init__(message)


class ConflictError(DomainError):
    """Unique field already taken (registration)."""

    def __init__(self, message: str):
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found")
