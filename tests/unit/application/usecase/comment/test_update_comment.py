"""Unit tests for UpdateCommentUseCase and DeleteCommentUseCase."""

import pytest

from diary.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from diary.domain.error import NotAuthorizedError, ValidationError
from diary.domain.repository import DiaryRepository, UserRepository
from tests.factories import make_actor, make_diary
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdateCommentUseCase:
    """Tests for UpdateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_update_comment_text_success(self, unit_env):
        """Updating comment text by author should succeed."""
        # Arrange
        add = await unit_env.get(AddCommentUseCase)
        update = await unit_env.get(UpdateCommentUseCase)
        users = await unit_env.get(UserRepository)
        alice = await make_actor(users, "alice")
        bob = await make_actor(users, "bob")
        diary = await make_diary(await unit_env.get(DiaryRepository), alice)
        created = await add.execute(
            AddCommentRequest(actor=bob, diary_id=diary.id, content="Frist!")
        )

        # Act
        response = await update.execute(
            UpdateCommentRequest(
                actor=bob,
                diary_id=diary.id,
                comment_id=created.id,
                content="First!",
            )
        )

        # Assert
        assert response.id == created.id
        assert response.content == "First!"
        assert response.author.username == "bob"

    @pytest.mark.asyncio
    async def test_update_comment_empty_text_rejected(self, unit_env):
        """Blank comment text should be rejected."""
        add = await unit_env.get(AddCommentUseCase)
        update = await unit_env.get(UpdateCommentUseCase)
        alice = await make_actor(await unit_env.get(UserRepository), "alice")
        diary = await make_diary(await unit_env.get(DiaryRepository), alice)
        created = await add.execute(
            AddCommentRequest(actor=alice, diary_id=diary.id, content="Hello")
        )

        with pytest.raises(ValidationError, match="Comment content is required"):
            await update.execute(
                UpdateCommentRequest(
                    actor=alice, diary_id=diary.id, comment_id=created.id, content=" "
                )
            )


class TestDeleteCommentUseCase:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_delete_reports_removed_count(self, unit_env):
        """Deleting a top-level comment should count its replies too."""
        # Arrange
        add = await unit_env.get(AddCommentUseCase)
        delete = await unit_env.get(DeleteCommentUseCase)
        users = await unit_env.get(UserRepository)
        alice = await make_actor(users, "alice")
        bob = await make_actor(users, "bob")
        diary = await make_diary(await unit_env.get(DiaryRepository), alice)
        top = await add.execute(
            AddCommentRequest(actor=bob, diary_id=diary.id, content="Top")
        )
        await add.execute(
            AddCommentRequest(
                actor=alice, diary_id=diary.id, content="Reply", parent_id=top.id
            )
        )

        # Act
        response = await delete.execute(
            DeleteCommentRequest(actor=alice, diary_id=diary.id, comment_id=top.id)
        )

        # Assert
        assert response.comment_id == top.id
        assert response.deleted_count == 2

    @pytest.mark.asyncio
    async def test_stranger_cannot_delete(self, unit_env):
        """Only the author or the diary owner may delete."""
        add = await unit_env.get(AddCommentUseCase)
        delete = await unit_env.get(DeleteCommentUseCase)
        users = await unit_env.get(UserRepository)
        alice = await make_actor(users, "alice")
        bob = await make_actor(users, "bob")
        carol = await make_actor(users, "carol")
        diary = await make_diary(await unit_env.get(DiaryRepository), alice)
        comment = await add.execute(
            AddCommentRequest(actor=bob, diary_id=diary.id, content="Mine")
        )

        with pytest.raises(NotAuthorizedError):
            await delete.execute(
                DeleteCommentRequest(
                    actor=carol, diary_id=diary.id, comment_id=comment.id
                )
            )
