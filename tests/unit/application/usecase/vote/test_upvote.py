"""Unit tests for UpvoteUseCase and GetUpvoteCountUseCase."""

from uuid import uuid4

import pytest

from roam.application.usecase.vote import (
    GetUpvoteCountRequest,
    GetUpvoteCountUseCase,
    UpvoteRequest,
    UpvoteUseCase,
)
from roam.domain.error import AlreadyVotedError, NotFoundError
from roam.domain.service import ItineraryService, PostService, UserService
from roam.domain.value import Username
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _post_and_voter(env) -> tuple[str, str]:
    user_service = await env.get(UserService)
    itinerary_service = await env.get(ItineraryService)
    post_service = await env.get(PostService)
    author = await user_service.create(Username("alice"))
    voter = await user_service.create(Username("bob"))
    itinerary = await itinerary_service.create(author.id, "Rome 3 days")
    post = await post_service.create(author.id, "My Rome Trip", "", 5, itinerary.id)
    return str(post.id), str(voter.id)


class TestUpvoteUseCase:
    """Tests for UpvoteUseCase."""

    @pytest.mark.asyncio
    async def test_upvote_returns_new_count(self, unit_env):
        post_id, voter = await _post_and_voter(unit_env)
        upvote = await unit_env.get(UpvoteUseCase)

        response = await upvote.execute(UpvoteRequest(post_id=post_id, user_id=voter))

        assert response.msg == "Post upvoted!"
        assert response.post_id == post_id
        assert response.upvotes == 1
        assert response.vote_id

    @pytest.mark.asyncio
    async def test_revote_rejected(self, unit_env):
        post_id, voter = await _post_and_voter(unit_env)
        upvote = await unit_env.get(UpvoteUseCase)
        count = await unit_env.get(GetUpvoteCountUseCase)
        await upvote.execute(UpvoteRequest(post_id=post_id, user_id=voter))

        with pytest.raises(AlreadyVotedError):
            await upvote.execute(UpvoteRequest(post_id=post_id, user_id=voter))

        response = await count.execute(GetUpvoteCountRequest(post_id=post_id))
        assert response.upvotes == 1
        assert response.msg == "Upvote count is 1"

    @pytest.mark.asyncio
    async def test_unknown_voter(self, unit_env):
        post_id, _ = await _post_and_voter(unit_env)
        upvote = await unit_env.get(UpvoteUseCase)

        with pytest.raises(NotFoundError):
            await upvote.execute(UpvoteRequest(post_id=post_id, user_id=str(uuid4())))


class TestGetUpvoteCountUseCase:
    """Tests for GetUpvoteCountUseCase."""

    @pytest.mark.asyncio
    async def test_zero_before_any_vote(self, unit_env):
        post_id, _ = await _post_and_voter(unit_env)
        count = await unit_env.get(GetUpvoteCountUseCase)

        response = await count.execute(GetUpvoteCountRequest(post_id=post_id))

        assert response.upvotes == 0

    @pytest.mark.asyncio
    async def test_unknown_post(self, unit_env):
        count = await unit_env.get(GetUpvoteCountUseCase)

        with pytest.raises(NotFoundError):
            await count.execute(GetUpvoteCountRequest(post_id=str(uuid4())))
