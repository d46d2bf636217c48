"""Create diary use case."""

from pydantic import BaseModel

from diary.application.usecase.base import BaseUseCase
from diary.application.usecase.common import DiaryItem, author_info, diary_item
from diary.domain.model import Actor
from diary.domain.service import DiaryService, UserService


class CreateDiaryRequest(BaseModel):
    """Create diary request."""

    actor: Actor
    title: str
    content: str
    is_public: bool = False
    tags: list[str] = []


class CreateDiaryUseCase(BaseUseCase):
    """Use case for writing a new diary entry."""

    def __init__(self, diary_service: DiaryService, user_service: UserService) -> None:
        """Initialize create diary use case.

        Args:
            diary_service: Diary domain service
            user_service: User domain service
        """
        self.diary_service = diary_service
        self.user_service = user_service

    async def execute(self, request: CreateDiaryRequest) -> DiaryItem:
        """Execute create diary flow.

        Args:
            request: Entry fields and the acting user

        Returns:
            The created diary (no reactions or comments yet)

        Raises:
            AuthenticationError: If the actor is a guest
            ValidationError: If title or content is invalid
        """
        diary = await self.diary_service.create_diary(
            request.actor,
            title=request.title,
            content=request.content,
            is_public=request.is_public,
            tags=request.tags,
        )
        users = await self.user_service.get_users_by_ids([diary.author_id])
        return diary_item(
            diary, author_info(diary.author_id, users), None, comment_count=0
        )
