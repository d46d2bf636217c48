"""Unit tests for DiaryService."""

from uuid import uuid4

import pytest

from diary.domain.error import (
    AuthenticationError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from diary.domain.model import GUEST
from diary.domain.repository import (
    CommentRepository,
    DiaryFilter,
    DiaryRepository,
    UserRepository,
)
from diary.domain.service import DiaryService, ReactionLedger
from diary.domain.value import DiaryId, Emoji, ReactionTarget, ReactionTargetType
from tests.factories import make_actor, make_comment, make_diary
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateDiary:
    @pytest.mark.asyncio
    async def test_creates_private_diary_by_default(self, unit_env):
        """New entries stay private until published."""
        # Arrange
        service = await unit_env.get(DiaryService)
        alice = await make_actor(await unit_env.get(UserRepository), "alice")

        # Act
        diary = await service.create_diary(
            alice, "  My first day  ", "It rained.", tags=[" life ", "", "rain"]
        )

        # Assert
        assert diary.is_public is False
        assert diary.title == "My first day"
        assert diary.author_id == alice.user_id
        assert diary.tags == ["life", "rain"]

    @pytest.mark.asyncio
    async def test_guest_cannot_create(self, unit_env):
        service = await unit_env.get(DiaryService)

        with pytest.raises(AuthenticationError):
            await service.create_diary(GUEST, "Title", "Body")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "title,content,message",
        [
            ("   ", "Body", "Title is required"),
            ("x" * 201, "Body", "Title cannot be more than 200 characters"),
            ("Title", "  \n ", "Content is required"),
        ],
    )
    async def test_rejects_invalid_fields(self, unit_env, title, content, message):
        service = await unit_env.get(DiaryService)
        alice = await make_actor(await unit_env.get(UserRepository), "alice")

        with pytest.raises(ValidationError, match=message):
            await service.create_diary(alice, title, content)

    @pytest.mark.asyncio
    async def test_title_of_exactly_200_characters_is_accepted(self, unit_env):
        service = await unit_env.get(DiaryService)
        alice = await make_actor(await unit_env.get(UserRepository), "alice")

        diary = await service.create_diary(alice, "x" * 200, "Body")

        assert len(diary.title) == 200


class TestReadDiary:
    @pytest.mark.asyncio
    async def test_private_diary_hidden_from_others(self, unit_env):
        # Arrange
        service = await unit_env.get(DiaryService)
        users = await unit_env.get(UserRepository)
        alice = await make_actor(users, "alice")
        bob = await make_actor(users, "bob")
        private = await make_diary(
            await unit_env.get(DiaryRepository), alice, is_public=False
        )

        # Act / Assert
        assert (await service.get_readable(alice, private.id)).id == private.id
        with pytest.raises(NotAuthorizedError):
            await service.get_readable(bob, private.id)
        with pytest.raises(NotAuthorizedError):
            await service.get_readable(GUEST, private.id)

    @pytest.mark.asyncio
    async def test_unknown_diary_is_not_found(self, unit_env):
        service = await unit_env.get(DiaryService)

        with pytest.raises(NotFoundError, match="Diary not found"):
            await service.get_readable(GUEST, DiaryId(uuid4()))


class TestUpdateDiary:
    @pytest.mark.asyncio
    async def test_partial_update_keeps_other_fields(self, unit_env):
        service = await unit_env.get(DiaryService)
        alice = await make_actor(await unit_env.get(UserRepository), "alice")
        diary = await service.create_diary(alice, "Title", "Body", tags=["a"])

        updated = await service.update_diary(alice, diary.id, content="New body")

        assert updated.title == "Title"
        assert updated.content == "New body"
        assert updated.tags == ["a"]
        assert updated.created_at == diary.created_at
        assert updated.updated_at >= diary.updated_at

    @pytest.mark.asyncio
    async def test_non_owner_cannot_update(self, unit_env):
        service = await unit_env.get(DiaryService)
        users = await unit_env.get(UserRepository)
        alice = await make_actor(users, "alice")
        bob = await make_actor(users, "bob")
        diary = await make_diary(await unit_env.get(DiaryRepository), alice)

        with pytest.raises(NotAuthorizedError, match="Not authorized to update"):
            await service.update_diary(bob, diary.id, title="Hijacked")

    @pytest.mark.asyncio
    async def test_toggle_visibility_flips_flag(self, unit_env):
        service = await unit_env.get(DiaryService)
        alice = await make_actor(await unit_env.get(UserRepository), "alice")
        diary = await service.create_diary(alice, "Title", "Body")

        published = await service.toggle_visibility(alice, diary.id)
        hidden = await service.toggle_visibility(alice, diary.id)

        assert published.is_public is True
        assert hidden.is_public is False


class TestDeleteDiary:
    @pytest.mark.asyncio
    async def test_delete_cascades_to_comments_and_reactions(self, unit_env):
        # Arrange
        service = await unit_env.get(DiaryService)
        ledger = await unit_env.get(ReactionLedger)
        users = await unit_env.get(UserRepository)
        diaries = await unit_env.get(DiaryRepository)
        comments = await unit_env.get(CommentRepository)
        alice = await make_actor(users, "alice")
        bob = await make_actor(users, "bob")
        diary = await make_diary(diaries, alice)
        top = await make_comment(comments, diary, bob)
        reply = await make_comment(comments, diary, alice, parent=top)
        diary_target = ReactionTarget(type=ReactionTargetType.DIARY, id=diary.id)
        reply_target = ReactionTarget(type=ReactionTargetType.COMMENT, id=reply.id)
        await ledger.toggle(diary_target, bob.user_id, Emoji.HEART)
        await ledger.toggle(reply_target, bob.user_id, Emoji.CLAP)

        # Act
        await service.delete_diary(alice, diary.id)

        # Assert
        assert await diaries.find_by_id(diary.id) is None
        assert await comments.find_by_id(top.id) is None
        assert await comments.find_by_id(reply.id) is None
        assert (await ledger.get_state(diary_target)).reactions == []
        assert (await ledger.get_state(reply_target)).reactions == []

    @pytest.mark.asyncio
    async def test_non_owner_cannot_delete(self, unit_env):
        service = await unit_env.get(DiaryService)
        users = await unit_env.get(UserRepository)
        diaries = await unit_env.get(DiaryRepository)
        alice = await make_actor(users, "alice")
        bob = await make_actor(users, "bob")
        diary = await make_diary(diaries, alice)

        with pytest.raises(NotAuthorizedError):
            await service.delete_diary(bob, diary.id)
        assert await diaries.find_by_id(diary.id) is not None


class TestListDiaries:
    @pytest.mark.asyncio
    async def test_public_listing_is_newest_first_and_excludes_private(self, unit_env):
        # Arrange
        service = await unit_env.get(DiaryService)
        diaries = await unit_env.get(DiaryRepository)
        alice = await make_actor(await unit_env.get(UserRepository), "alice")
        old = await make_diary(diaries, alice, "Old", age_minutes=10)
        new = await make_diary(diaries, alice, "New", age_minutes=1)
        await make_diary(diaries, alice, "Secret", is_public=False)

        # Act
        page, total = await service.list_diaries(DiaryFilter(is_public=True), limit=10)

        # Assert
        assert [d.id for d in page] == [new.id, old.id]
        assert total == 2

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive_on_title(self, unit_env):
        service = await unit_env.get(DiaryService)
        diaries = await unit_env.get(DiaryRepository)
        alice = await make_actor(await unit_env.get(UserRepository), "alice")
        await make_diary(diaries, alice, "Summer Holiday")
        await make_diary(diaries, alice, "Winter")

        page, total = await service.list_diaries(
            DiaryFilter(is_public=True, search="summer"), limit=10
        )

        assert [d.title for d in page] == ["Summer Holiday"]
        assert total == 1

    @pytest.mark.asyncio
    async def test_comment_counts_fill_missing_with_zero(self, unit_env):
        service = await unit_env.get(DiaryService)
        diaries = await unit_env.get(DiaryRepository)
        comments = await unit_env.get(CommentRepository)
        alice = await make_actor(await unit_env.get(UserRepository), "alice")
        busy = await make_diary(diaries, alice, "Busy")
        quiet = await make_diary(diaries, alice, "Quiet")
        top = await make_comment(comments, busy, alice)
        await make_comment(comments, busy, alice, parent=top)

        counts = await service.comment_counts([busy.id, quiet.id])

        assert counts == {busy.id: 2, quiet.id: 0}


class TestReactToDiary:
    @pytest.mark.asyncio
    async def test_second_identical_reaction_removes_it(self, unit_env):
        service = await unit_env.get(DiaryService)
        users = await unit_env.get(UserRepository)
        alice = await make_actor(users, "alice")
        bob = await make_actor(users, "bob")
        diary = await make_diary(await unit_env.get(DiaryRepository), alice)

        first = await service.react(bob, diary.id, Emoji.WOW.value)
        second = await service.react(bob, diary.id, Emoji.WOW.value)

        assert first.user_reaction == Emoji.WOW
        assert first.summary == {Emoji.WOW.value: 1}
        assert second.user_reaction is None
        assert second.summary == {}

    @pytest.mark.asyncio
    async def test_cannot_react_to_private_diary_even_as_owner(self, unit_env):
        service = await unit_env.get(DiaryService)
        alice = await make_actor(await unit_env.get(UserRepository), "alice")
        diary = await make_diary(
            await unit_env.get(DiaryRepository), alice, is_public=False
        )

        with pytest.raises(NotAuthorizedError, match="Cannot react to a private diary"):
            await service.react(alice, diary.id, Emoji.HEART.value)

    @pytest.mark.asyncio
    async def test_invalid_emoji_rejected_before_lookup(self, unit_env):
        service = await unit_env.get(DiaryService)
        alice = await make_actor(await unit_env.get(UserRepository), "alice")

        with pytest.raises(ValidationError, match="Invalid emoji"):
            await service.react(alice, DiaryId(uuid4()), "\U0001f525")

    @pytest.mark.asyncio
    async def test_guest_cannot_react(self, unit_env):
        service = await unit_env.get(DiaryService)

        with pytest.raises(AuthenticationError):
            await service.react(GUEST, DiaryId(uuid4()), Emoji.HEART.value)
