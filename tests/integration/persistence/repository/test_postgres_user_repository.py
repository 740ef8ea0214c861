"""Integration tests for PostgresUserRepository.

These need PostgreSQL with migrations applied (``scripts/run_migrations.py``)
and DATABASE__URL pointing at it.
"""

from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from roam.domain.repository import UserRepository
from roam.domain.value import UserId, Username
from tests.conftest import make_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

integration_env = create_env_fixture(unmock={"persistence"})


def _name(prefix: str) -> str:
    return f"{prefix}-{uuid4().hex[:12]}"


class TestUserRepositoryIntegration:
    """Round trips through the users table."""

    @pytest.mark.asyncio
    async def test_update_username(self, integration_env):
        repo = await integration_env.get(UserRepository)
        user = await repo.save(make_user(_name("u")))
        new_name = Username(_name("renamed"))

        renamed = await repo.update_username(user.id, new_name)

        assert renamed is not None
        assert renamed.username == new_name
        assert (await repo.find_by_username(new_name)).id == user.id
        assert await repo.find_by_username(user.username) is None

    @pytest.mark.asyncio
    async def test_update_to_taken_username_violates_unique(self, integration_env):
        repo = await integration_env.get(UserRepository)
        first = await repo.save(make_user(_name("u")))
        second = await repo.save(make_user(_name("u")))

        with pytest.raises(IntegrityError):
            await repo.update_username(second.id, first.username)

    @pytest.mark.asyncio
    async def test_update_or_delete_missing_user(self, integration_env):
        repo = await integration_env.get(UserRepository)
        missing = UserId(uuid4())

        assert await repo.update_username(missing, Username(_name("x"))) is None
        assert await repo.delete(missing) is False
