"""Unit tests for ResolveActorUseCase."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest

from diary.config import AuthSettings
from diary.application.usecase.auth import ResolveActorRequest, ResolveActorUseCase
from diary.domain.error import AuthenticationError
from diary.domain.model import GUEST, Authenticated
from diary.domain.repository import UserRepository
from diary.domain.service import JWTService
from tests.factories import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestResolveActor:
    @pytest.mark.asyncio
    async def test_valid_token_resolves_user(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ResolveActorUseCase)
        jwt_service = await unit_env.get(JWTService)
        alice = await (await unit_env.get(UserRepository)).save(make_user("alice"))
        token = jwt_service.create_token(str(alice.id))

        # Act
        actor = await use_case.execute(ResolveActorRequest(token=token, required=True))

        # Assert
        assert isinstance(actor, Authenticated)
        assert actor.user_id == alice.id

    @pytest.mark.asyncio
    async def test_missing_token_is_guest_when_optional(self, unit_env):
        use_case = await unit_env.get(ResolveActorUseCase)

        actor = await use_case.execute(ResolveActorRequest())

        assert actor == GUEST

    @pytest.mark.asyncio
    async def test_missing_token_fails_when_required(self, unit_env):
        use_case = await unit_env.get(ResolveActorUseCase)

        with pytest.raises(AuthenticationError, match="no token"):
            await use_case.execute(ResolveActorRequest(required=True))

    @pytest.mark.asyncio
    async def test_garbage_token(self, unit_env):
        use_case = await unit_env.get(ResolveActorUseCase)

        assert await use_case.execute(ResolveActorRequest(token="not.a.jwt")) == GUEST
        with pytest.raises(AuthenticationError, match="token failed"):
            await use_case.execute(ResolveActorRequest(token="not.a.jwt", required=True))

    @pytest.mark.asyncio
    async def test_expired_token_fails(self, unit_env):
        use_case = await unit_env.get(ResolveActorUseCase)
        settings = await unit_env.get(AuthSettings)
        alice = await (await unit_env.get(UserRepository)).save(make_user("alice"))
        expired = jwt.encode(
            {
                "user_id": str(alice.id),
                "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
            },
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )

        with pytest.raises(AuthenticationError, match="token failed"):
            await use_case.execute(ResolveActorRequest(token=expired, required=True))

    @pytest.mark.asyncio
    async def test_token_for_deleted_user(self, unit_env):
        use_case = await unit_env.get(ResolveActorUseCase)
        jwt_service = await unit_env.get(JWTService)
        token = jwt_service.create_token(str(uuid4()))

        assert await use_case.execute(ResolveActorRequest(token=token)) == GUEST
        with pytest.raises(AuthenticationError, match="user not found"):
            await use_case.execute(ResolveActorRequest(token=token, required=True))
