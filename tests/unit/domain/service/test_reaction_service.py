"""Unit tests for the reaction ledger."""

import asyncio
from uuid import uuid4

import pytest

from diary.domain.error import ValidationError
from diary.domain.service import ReactionLedger
from diary.domain.service.reaction_service import (
    parse_emoji,
    summarize,
    toggle_reaction,
    user_reaction,
)
from diary.domain.value import Emoji, ReactionTarget, ReactionTargetType, UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

TARGET = ReactionTarget(type=ReactionTargetType.DIARY, id=uuid4())


class TestToggleReaction:
    """The pure toggle rule."""

    def test_adds_reaction_when_user_has_none(self):
        user = UserId(uuid4())

        result = toggle_reaction([], TARGET, user, Emoji.HEART)

        assert [(r.user_id, r.emoji) for r in result] == [(user, Emoji.HEART)]

    def test_same_emoji_twice_is_identity(self):
        user = UserId(uuid4())
        other = UserId(uuid4())
        start = toggle_reaction([], TARGET, other, Emoji.CLAP)

        once = toggle_reaction(start, TARGET, user, Emoji.HEART)
        twice = toggle_reaction(once, TARGET, user, Emoji.HEART)

        assert twice == start

    def test_different_emoji_replaces_previous(self):
        user = UserId(uuid4())
        hearted = toggle_reaction([], TARGET, user, Emoji.HEART)

        result = toggle_reaction(hearted, TARGET, user, Emoji.LAUGH)

        assert len(result) == 1
        assert result[0].emoji == Emoji.LAUGH

    def test_user_holds_at_most_one_reaction(self):
        user = UserId(uuid4())
        reactions = []
        for emoji in [Emoji.HEART, Emoji.WOW, Emoji.SAD, Emoji.CLAP, Emoji.CLAP, Emoji.WOW]:
            reactions = toggle_reaction(reactions, TARGET, user, emoji)
            assert len([r for r in reactions if r.user_id == user]) <= 1

    def test_other_users_untouched(self):
        alice, bob = UserId(uuid4()), UserId(uuid4())
        reactions = toggle_reaction([], TARGET, alice, Emoji.HEART)

        reactions = toggle_reaction(reactions, TARGET, bob, Emoji.HEART)
        reactions = toggle_reaction(reactions, TARGET, bob, Emoji.SAD)

        assert user_reaction(reactions, alice) == Emoji.HEART
        assert user_reaction(reactions, bob) == Emoji.SAD


class TestSummary:
    def test_summarize_counts_per_emoji(self):
        reactions = []
        for emoji in [Emoji.HEART, Emoji.HEART, Emoji.CLAP]:
            reactions = toggle_reaction(reactions, TARGET, UserId(uuid4()), emoji)

        assert summarize(reactions) == {Emoji.HEART.value: 2, Emoji.CLAP.value: 1}

    def test_summarize_empty(self):
        assert summarize([]) == {}

    def test_user_reaction_for_guest_is_none(self):
        reactions = toggle_reaction([], TARGET, UserId(uuid4()), Emoji.WOW)
        assert user_reaction(reactions, None) is None


class TestParseEmoji:
    def test_accepts_allowed_emoji(self):
        assert parse_emoji("\U0001f602") == Emoji.LAUGH

    @pytest.mark.parametrize("raw", ["\U0001f525", "", None, "heart"])
    def test_rejects_anything_else(self, raw):
        with pytest.raises(ValidationError, match="Invalid emoji"):
            parse_emoji(raw)


class TestReactionLedger:
    @pytest.mark.asyncio
    async def test_toggle_returns_state_for_user(self, unit_env):
        ledger = await unit_env.get(ReactionLedger)
        user = UserId(uuid4())

        state = await ledger.toggle(TARGET, user, Emoji.CLAP)

        assert state.user_reaction == Emoji.CLAP
        assert state.summary == {Emoji.CLAP.value: 1}

        state = await ledger.toggle(TARGET, user, Emoji.CLAP)

        assert state.user_reaction is None
        assert state.reactions == []

    @pytest.mark.asyncio
    async def test_concurrent_toggles_by_different_users_all_land(self, unit_env):
        ledger = await unit_env.get(ReactionLedger)
        target = ReactionTarget(type=ReactionTargetType.COMMENT, id=uuid4())
        users = [UserId(uuid4()) for _ in range(20)]

        await asyncio.gather(
            *(ledger.toggle(target, user, Emoji.HEART) for user in users)
        )

        state = await ledger.get_state(target)
        assert state.summary == {Emoji.HEART.value: 20}
        assert {r.user_id for r in state.reactions} == set(users)

    @pytest.mark.asyncio
    async def test_get_states_includes_targets_without_reactions(self, unit_env):
        ledger = await unit_env.get(ReactionLedger)
        user = UserId(uuid4())
        reacted, quiet = uuid4(), uuid4()
        await ledger.toggle(
            ReactionTarget(type=ReactionTargetType.DIARY, id=reacted), user, Emoji.WOW
        )

        states = await ledger.get_states(ReactionTargetType.DIARY, [reacted, quiet], user)

        assert states[reacted].user_reaction == Emoji.WOW
        assert states[quiet].reactions == []

    @pytest.mark.asyncio
    async def test_purge_removes_only_given_targets(self, unit_env):
        ledger = await unit_env.get(ReactionLedger)
        keep = ReactionTarget(type=ReactionTargetType.COMMENT, id=uuid4())
        drop = ReactionTarget(type=ReactionTargetType.COMMENT, id=uuid4())
        await ledger.toggle(keep, UserId(uuid4()), Emoji.SAD)
        await ledger.toggle(drop, UserId(uuid4()), Emoji.SAD)
        await ledger.toggle(drop, UserId(uuid4()), Emoji.HEART)

        deleted = await ledger.purge(ReactionTargetType.COMMENT, [drop.id])

        assert deleted == 2
        assert (await ledger.get_state(drop)).reactions == []
        assert len((await ledger.get_state(keep)).reactions) == 1
