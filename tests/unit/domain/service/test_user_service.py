"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from discuss.domain.error import UnavailableError
from discuss.domain.service import UserService
from discuss.domain.value import UserId, UserStat
from discuss.persistence.repository.inmemory import InMemoryUserRepository
from tests.harness import create_env_fixture, seed_user

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class BrokenUserRepository(InMemoryUserRepository):
    """User repository whose every call fails."""

    async def find_by_ids(self, user_ids):
        raise ConnectionError("identity store down")

    async def increment_stat(self, user_id: UserId, stat: UserStat) -> bool:
        raise ConnectionError("identity store down")


class TestResolveIdentities:
    """Tests for identity resolution."""

    @pytest.mark.asyncio
    async def test_resolves_known_users_and_skips_unknown(self, unit_env):
        service = await unit_env.get(UserService)
        ada = await seed_user(unit_env, "Ada")
        unknown = UserId(uuid4())

        profiles = await service.resolve_identities([ada.id, unknown, ada.id])

        assert list(profiles) == [ada.id]
        assert profiles[ada.id].display_name == "Ada"
        assert await service.resolve_identity(unknown) is None

    @pytest.mark.asyncio
    async def test_lookup_failure_is_unavailable(self):
        service = UserService(user_repository=BrokenUserRepository())

        with pytest.raises(UnavailableError):
            await service.resolve_identities([UserId(uuid4())])


class TestStats:
    """Tests for best-effort stat increments."""

    @pytest.mark.asyncio
    async def test_counters_are_incremented(self, unit_env):
        service = await unit_env.get(UserService)
        ada = await seed_user(unit_env, "Ada")

        await service.record_comment_posted(ada.id)
        await service.record_comment_posted(ada.id)
        await service.record_upvote_received(ada.id)

        user = await service.user_repository.find_by_id(ada.id)
        assert user.comments_posted == 2
        assert user.upvotes_received == 1

    @pytest.mark.asyncio
    async def test_unknown_user_is_ignored(self, unit_env):
        service = await unit_env.get(UserService)

        await service.record_comment_posted(UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_failures_are_swallowed(self):
        service = UserService(user_repository=BrokenUserRepository())

        await service.record_comment_posted(UserId(uuid4()))
        await service.record_upvote_received(UserId(uuid4()))
