"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from diary.domain.error import (
    AuthenticationError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from diary.domain.model import GUEST
from diary.domain.repository import CommentRepository, DiaryRepository, UserRepository
from diary.domain.service import CommentService, ReactionLedger
from diary.domain.value import (
    CommentId,
    Emoji,
    ReactionTarget,
    ReactionTargetType,
    Reply,
    TopLevel,
)
from tests.factories import make_actor, make_comment, make_diary
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def setup_diary(unit_env, is_public: bool = True):
    """Alice owns a diary, Bob is another registered user."""
    users = await unit_env.get(UserRepository)
    alice = await make_actor(users, "alice")
    bob = await make_actor(users, "bob")
    diary = await make_diary(
        await unit_env.get(DiaryRepository), alice, is_public=is_public
    )
    return alice, bob, diary


class TestAddComment:
    @pytest.mark.asyncio
    async def test_adds_top_level_comment(self, unit_env):
        # Arrange
        service = await unit_env.get(CommentService)
        _, bob, diary = await setup_diary(unit_env)

        # Act
        comment = await service.add_comment(bob, diary.id, "  Lovely entry  ")

        # Assert
        assert comment.content == "Lovely entry"
        assert comment.is_top_level
        assert comment.author_id == bob.user_id

    @pytest.mark.asyncio
    async def test_adds_reply_to_top_level_comment(self, unit_env):
        service = await unit_env.get(CommentService)
        alice, bob, diary = await setup_diary(unit_env)
        top = await service.add_comment(bob, diary.id, "Question?")

        reply = await service.add_comment(alice, diary.id, "Answer.", parent_id=top.id)

        assert reply.parent_id == top.id
        assert reply.position == Reply(parent_id=top.id)
        assert top.position == TopLevel()

    @pytest.mark.asyncio
    async def test_reply_to_reply_is_rejected(self, unit_env):
        service = await unit_env.get(CommentService)
        alice, bob, diary = await setup_diary(unit_env)
        top = await service.add_comment(bob, diary.id, "Question?")
        reply = await service.add_comment(alice, diary.id, "Answer.", parent_id=top.id)

        with pytest.raises(ValidationError, match="Cannot reply to a reply"):
            await service.add_comment(bob, diary.id, "Thanks!", parent_id=reply.id)

    @pytest.mark.asyncio
    async def test_parent_from_other_diary_is_rejected(self, unit_env):
        service = await unit_env.get(CommentService)
        alice, bob, diary = await setup_diary(unit_env)
        other = await make_diary(await unit_env.get(DiaryRepository), alice, "Other")
        foreign = await make_comment(await unit_env.get(CommentRepository), other, bob)

        with pytest.raises(ValidationError, match="Parent comment not found"):
            await service.add_comment(bob, diary.id, "Hi", parent_id=foreign.id)

    @pytest.mark.asyncio
    async def test_private_diary_refuses_comments_from_owner(self, unit_env):
        service = await unit_env.get(CommentService)
        alice, _, diary = await setup_diary(unit_env, is_public=False)

        with pytest.raises(NotAuthorizedError, match="Cannot comment on a private diary"):
            await service.add_comment(alice, diary.id, "Note to self")

    @pytest.mark.asyncio
    async def test_guest_cannot_comment(self, unit_env):
        service = await unit_env.get(CommentService)
        _, _, diary = await setup_diary(unit_env)

        with pytest.raises(AuthenticationError):
            await service.add_comment(GUEST, diary.id, "Hello")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "content,message",
        [
            ("   ", "Comment content is required"),
            ("x" * 1001, "Comment cannot be more than 1000 characters"),
        ],
    )
    async def test_rejects_invalid_content(self, unit_env, content, message):
        service = await unit_env.get(CommentService)
        _, bob, diary = await setup_diary(unit_env)

        with pytest.raises(ValidationError, match=message):
            await service.add_comment(bob, diary.id, content)


class TestListComments:
    @pytest.mark.asyncio
    async def test_threads_paginate_top_level_with_all_replies(self, unit_env):
        # Arrange
        service = await unit_env.get(CommentService)
        comments = await unit_env.get(CommentRepository)
        alice, bob, diary = await setup_diary(unit_env)
        older = await make_comment(comments, diary, bob, "older", age_minutes=30)
        newer = await make_comment(comments, diary, bob, "newer", age_minutes=20)
        first = await make_comment(
            comments, diary, alice, "first", parent=older, age_minutes=10
        )
        second = await make_comment(
            comments, diary, bob, "second", parent=older, age_minutes=5
        )

        # Act
        _, page_one, total = await service.list_comments(GUEST, diary.id, limit=1)
        _, page_two, _ = await service.list_comments(GUEST, diary.id, limit=1, offset=1)

        # Assert
        assert total == 2
        assert [t.comment.id for t in page_one] == [newer.id]
        assert page_one[0].replies == []
        assert [t.comment.id for t in page_two] == [older.id]
        assert [r.id for r in page_two[0].replies] == [first.id, second.id]

    @pytest.mark.asyncio
    async def test_owner_can_list_comments_on_private_diary(self, unit_env):
        service = await unit_env.get(CommentService)
        alice, bob, diary = await setup_diary(unit_env, is_public=False)
        await make_comment(await unit_env.get(CommentRepository), diary, bob)

        _, threads, total = await service.list_comments(alice, diary.id, limit=20)

        assert total == 1
        assert len(threads) == 1
        with pytest.raises(NotAuthorizedError):
            await service.list_comments(bob, diary.id, limit=20)


class TestUpdateComment:
    @pytest.mark.asyncio
    async def test_author_edits_own_comment(self, unit_env):
        service = await unit_env.get(CommentService)
        _, bob, diary = await setup_diary(unit_env)
        comment = await service.add_comment(bob, diary.id, "Typo")

        updated = await service.update_comment(bob, diary.id, comment.id, "Fixed")

        assert updated.content == "Fixed"
        assert updated.parent_id == comment.parent_id

    @pytest.mark.asyncio
    async def test_diary_owner_cannot_edit_others_comment(self, unit_env):
        service = await unit_env.get(CommentService)
        alice, bob, diary = await setup_diary(unit_env)
        comment = await service.add_comment(bob, diary.id, "Mine")

        with pytest.raises(NotAuthorizedError):
            await service.update_comment(alice, diary.id, comment.id, "Theirs now")

    @pytest.mark.asyncio
    async def test_comment_must_belong_to_diary(self, unit_env):
        service = await unit_env.get(CommentService)
        alice, bob, diary = await setup_diary(unit_env)
        other = await make_diary(await unit_env.get(DiaryRepository), alice, "Other")
        comment = await service.add_comment(bob, other.id, "Elsewhere")

        with pytest.raises(ValidationError, match="does not belong to this diary"):
            await service.update_comment(bob, diary.id, comment.id, "Moved")

    @pytest.mark.asyncio
    async def test_unknown_comment_is_not_found(self, unit_env):
        service = await unit_env.get(CommentService)
        _, bob, diary = await setup_diary(unit_env)

        with pytest.raises(NotFoundError, match="Comment not found"):
            await service.update_comment(bob, diary.id, CommentId(uuid4()), "Hi")


class TestDeleteComment:
    @pytest.mark.asyncio
    async def test_deleting_top_level_removes_replies_and_reactions(self, unit_env):
        # Arrange
        service = await unit_env.get(CommentService)
        ledger = await unit_env.get(ReactionLedger)
        comments = await unit_env.get(CommentRepository)
        alice, bob, diary = await setup_diary(unit_env)
        top = await service.add_comment(bob, diary.id, "Top")
        reply = await service.add_comment(alice, diary.id, "Reply", parent_id=top.id)
        await service.react(alice, diary.id, reply.id, Emoji.SAD.value)

        # Act
        deleted = await service.delete_comment(bob, diary.id, top.id)

        # Assert
        assert deleted == 2
        assert await comments.find_by_id(top.id) is None
        assert await comments.find_by_id(reply.id) is None
        state = await ledger.get_state(
            ReactionTarget(type=ReactionTargetType.COMMENT, id=reply.id)
        )
        assert state.reactions == []

    @pytest.mark.asyncio
    async def test_deleting_one_thread_leaves_other_threads_untouched(self, unit_env):
        # Arrange
        service = await unit_env.get(CommentService)
        ledger = await unit_env.get(ReactionLedger)
        comments = await unit_env.get(CommentRepository)
        alice, bob, diary = await setup_diary(unit_env)
        doomed = await service.add_comment(bob, diary.id, "First")
        doomed_reply = await service.add_comment(
            alice, diary.id, "Re: first", parent_id=doomed.id
        )
        kept = await service.add_comment(bob, diary.id, "Second")
        kept_reply = await service.add_comment(
            alice, diary.id, "Re: second", parent_id=kept.id
        )
        await service.react(alice, diary.id, kept.id, Emoji.CLAP.value)
        await service.react(bob, diary.id, kept_reply.id, Emoji.HEART.value)

        # Act
        deleted = await service.delete_comment(bob, diary.id, doomed.id)

        # Assert
        assert deleted == 2
        assert await comments.find_by_id(doomed_reply.id) is None
        assert await comments.find_by_id(kept.id) == kept
        assert await comments.find_by_id(kept_reply.id) == kept_reply
        kept_state = await ledger.get_state(
            ReactionTarget(type=ReactionTargetType.COMMENT, id=kept.id)
        )
        reply_state = await ledger.get_state(
            ReactionTarget(type=ReactionTargetType.COMMENT, id=kept_reply.id)
        )
        assert kept_state.summary == {Emoji.CLAP.value: 1}
        assert reply_state.summary == {Emoji.HEART.value: 1}


    @pytest.mark.asyncio
    async def test_deleting_reply_keeps_parent(self, unit_env):
        service = await unit_env.get(CommentService)
        comments = await unit_env.get(CommentRepository)
        alice, bob, diary = await setup_diary(unit_env)
        top = await service.add_comment(bob, diary.id, "Top")
        reply = await service.add_comment(alice, diary.id, "Reply", parent_id=top.id)

        deleted = await service.delete_comment(alice, diary.id, reply.id)

        assert deleted == 1
        assert await comments.find_by_id(top.id) is not None

    @pytest.mark.asyncio
    async def test_diary_owner_can_delete_others_comment(self, unit_env):
        service = await unit_env.get(CommentService)
        alice, bob, diary = await setup_diary(unit_env)
        comment = await service.add_comment(bob, diary.id, "Spam")

        assert await service.delete_comment(alice, diary.id, comment.id) == 1

    @pytest.mark.asyncio
    async def test_third_party_cannot_delete(self, unit_env):
        service = await unit_env.get(CommentService)
        users = await unit_env.get(UserRepository)
        _, bob, diary = await setup_diary(unit_env)
        carol = await make_actor(users, "carol")
        comment = await service.add_comment(bob, diary.id, "Mine")

        with pytest.raises(NotAuthorizedError):
            await service.delete_comment(carol, diary.id, comment.id)


class TestReactToComment:
    @pytest.mark.asyncio
    async def test_toggle_switches_emoji(self, unit_env):
        service = await unit_env.get(CommentService)
        alice, bob, diary = await setup_diary(unit_env)
        comment = await service.add_comment(bob, diary.id, "Joke")

        await service.react(alice, diary.id, comment.id, Emoji.HEART.value)
        state = await service.react(alice, diary.id, comment.id, Emoji.LAUGH.value)

        assert state.user_reaction == Emoji.LAUGH
        assert state.summary == {Emoji.LAUGH.value: 1}

    @pytest.mark.asyncio
    async def test_cannot_react_once_diary_is_private(self, unit_env):
        service = await unit_env.get(CommentService)
        diaries = await unit_env.get(DiaryRepository)
        alice, bob, diary = await setup_diary(unit_env)
        comment = await service.add_comment(bob, diary.id, "Hello")
        await diaries.save(diary.model_copy(update={"is_public": False}))

        with pytest.raises(NotAuthorizedError):
            await service.react(bob, diary.id, comment.id, Emoji.HEART.value)
