"""Response envelope shared by every endpoint."""

from typing import Generic, TypeVar

from pydantic import BaseModel

from diary.application.usecase.common import Pagination

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """Uniform response body.

    Successful calls carry ``data`` (and ``pagination`` for list
    endpoints); failures carry ``success=False`` and a ``message``.
    """

    success: bool = True
    data: T | None = None
    message: str | None = None
    pagination: Pagination | None = None


def ok(
    data: T | None = None,
    message: str | None = None,
    pagination: Pagination | None = None,
) -> Envelope[T]:
    return Envelope(success=True, data=data, message=message, pagination=pagination)


def failure(message: str) -> dict:
    """Failure body as a plain dict, for exception handlers."""
    return Envelope(success=False, message=message).model_dump(mode="json")
