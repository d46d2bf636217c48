"""Diary use cases."""

from .create_diary import CreateDiaryRequest, CreateDiaryUseCase
from .delete_diary import DeleteDiaryRequest, DeleteDiaryResponse, DeleteDiaryUseCase
from .get_diary import GetDiaryRequest, GetDiaryUseCase
from .list_my_diaries import ListMyDiariesRequest, ListMyDiariesUseCase
from .list_public_diaries import (
    ListDiariesResponse,
    ListPublicDiariesRequest,
    ListPublicDiariesUseCase,
)
from .react_to_diary import ReactToDiaryRequest, ReactToDiaryUseCase
from .toggle_visibility import (
    ToggleVisibilityRequest,
    ToggleVisibilityResponse,
    ToggleVisibilityUseCase,
)
from .update_diary import UpdateDiaryRequest, UpdateDiaryUseCase

__all__ = [
    "CreateDiaryRequest",
    "CreateDiaryUseCase",
    "DeleteDiaryRequest",
    "DeleteDiaryResponse",
    "DeleteDiaryUseCase",
    "GetDiaryRequest",
    "GetDiaryUseCase",
    "ListDiariesResponse",
    "ListMyDiariesRequest",
    "ListMyDiariesUseCase",
    "ListPublicDiariesRequest",
    "ListPublicDiariesUseCase",
    "ReactToDiaryRequest",
    "ReactToDiaryUseCase",
    "ToggleVisibilityRequest",
    "ToggleVisibilityResponse",
    "ToggleVisibilityUseCase",
    "UpdateDiaryRequest",
    "UpdateDiaryUseCase",
]
