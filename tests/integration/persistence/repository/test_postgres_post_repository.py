"""Integration tests for PostgresPostRepository and PostgresVoteRepository.

These need PostgreSQL with migrations applied (``scripts/run_migrations.py``)
and DATABASE__URL pointing at it.
"""

import asyncio
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from roam.domain.model import Vote
from roam.domain.repository import (
    ItineraryRepository,
    PostRepository,
    UserRepository,
    VoteRepository,
)
from roam.domain.value import PostId, PostOptions, VoteId
from tests.conftest import make_itinerary, make_post, make_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

integration_env = create_env_fixture(unmock={"persistence"})


async def _published(env, title: str = "My Rome Trip"):
    """Save an author, an itinerary and a post; return (author, post)."""
    users = await env.get(UserRepository)
    itineraries = await env.get(ItineraryRepository)
    posts = await env.get(PostRepository)
    author = await users.save(make_user(f"pt-{uuid4().hex[:12]}"))
    itinerary = await itineraries.save(make_itinerary(author.id))
    post = await posts.save(make_post(author.id, itinerary.id, title=title))
    return author, post


class TestPostRepositoryIntegration:
    """Round trips through the posts and post_favorites tables."""

    @pytest.mark.asyncio
    async def test_options_survive_jsonb(self, integration_env):
        repo = await integration_env.get(PostRepository)
        _, post = await _published(integration_env)

        updated = await repo.update(
            post.id, {"options": PostOptions(background_color="#00aaff")}
        )

        assert updated.options == PostOptions(background_color="#00aaff")
        found = await repo.find_by_id(post.id)
        assert found.options == PostOptions(background_color="#00aaff")

    @pytest.mark.asyncio
    async def test_title_search_escapes_wildcards(self, integration_env):
        repo = await integration_env.get(PostRepository)
        marker = uuid4().hex[:8]
        author, plain = await _published(integration_env, f"Paris {marker} trip")

        assert [p.id for p in await repo.find_by_title(marker.upper())] == [plain.id]
        assert await repo.find_by_title(f"{marker}%", author_id=author.id) == []

    @pytest.mark.asyncio
    async def test_favorites_are_set_like(self, integration_env):
        repo = await integration_env.get(PostRepository)
        users = await integration_env.get(UserRepository)
        _, post = await _published(integration_env)
        fan = await users.save(make_user(f"fan-{uuid4().hex[:12]}"))

        assert await repo.add_favorite_user(post.id, fan.id) is True
        assert await repo.add_favorite_user(post.id, fan.id) is False
        assert [p.id for p in await repo.find_favorited_by(fan.id)] == [post.id]
        assert await repo.remove_favorite_user(post.id, fan.id) is True
        assert await repo.remove_favorite_user(post.id, fan.id) is False
        assert (await repo.find_by_id(post.id)).favorite_users == frozenset()

    @pytest.mark.asyncio
    async def test_concurrent_favorites_insert_once(self, integration_env):
        repo = await integration_env.get(PostRepository)
        users = await integration_env.get(UserRepository)
        _, post = await _published(integration_env)
        fan = await users.save(make_user(f"fan-{uuid4().hex[:12]}"))
        other = await users.save(make_user(f"fan-{uuid4().hex[:12]}"))

        results = await asyncio.gather(
            repo.add_favorite_user(post.id, fan.id),
            repo.add_favorite_user(post.id, fan.id),
            repo.add_favorite_user(post.id, other.id),
        )

        assert sorted(results) == [False, True, True]
        found = await repo.find_by_id(post.id)
        assert found.favorite_users == frozenset({fan.id, other.id})

    @pytest.mark.asyncio
    async def test_favorite_on_missing_post(self, integration_env):
        repo = await integration_env.get(PostRepository)
        users = await integration_env.get(UserRepository)
        fan = await users.save(make_user(f"fan-{uuid4().hex[:12]}"))

        assert await repo.add_favorite_user(PostId(uuid4()), fan.id) is False

    @pytest.mark.asyncio
    async def test_post_outlives_its_itinerary(self, integration_env):
        repo = await integration_env.get(PostRepository)
        itineraries = await integration_env.get(ItineraryRepository)
        _, post = await _published(integration_env)

        await itineraries.delete(post.itinerary_id)

        found = await repo.find_by_id(post.id)
        assert found is not None
        assert found.itinerary_id == post.itinerary_id


class TestVoteRepositoryIntegration:
    """Round trips through the votes table."""

    @pytest.mark.asyncio
    async def test_duplicate_vote_violates_unique_constraint(self, integration_env):
        votes = await integration_env.get(VoteRepository)
        users = await integration_env.get(UserRepository)
        _, post = await _published(integration_env)
        voter = await users.save(make_user(f"v-{uuid4().hex[:12]}"))

        await votes.save(Vote(id=VoteId(uuid4()), post_id=post.id, user_id=voter.id))
        with pytest.raises(IntegrityError):
            await votes.save(
                Vote(id=VoteId(uuid4()), post_id=post.id, user_id=voter.id)
            )

        assert await votes.count_by_post(post.id) == 1
        assert await votes.find_by_post_and_user(post.id, voter.id) is not None
