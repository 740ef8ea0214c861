"""Unit tests for ResponseAggregator."""

from uuid import uuid4

import pytest

from roam.application.projection import ResponseAggregator
from roam.domain.error import NotFoundError
from roam.domain.repository import ItineraryRepository, PostRepository
from roam.domain.service import DELETED_USER, ItineraryService, UserService
from roam.domain.value import PostOptions, UserId, Username
from tests.conftest import make_itinerary, make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestProjectItinerary:
    """Tests for project_itinerary."""

    @pytest.mark.asyncio
    async def test_resolves_author_and_collaborators(self, unit_env):
        aggregator = await unit_env.get(ResponseAggregator)
        user_service = await unit_env.get(UserService)
        itinerary_service = await unit_env.get(ItineraryService)
        alice = await user_service.create(Username("alice"))
        bob = await user_service.create(Username("bob"))
        carol = await user_service.create(Username("carol"))
        itinerary = await itinerary_service.create(alice.id, "Rome 3 days")
        await itinerary_service.update(itinerary.id, new_collaborator=bob.id)
        itinerary = await itinerary_service.update(
            itinerary.id, new_collaborator=carol.id
        )

        view = await aggregator.project_itinerary(itinerary)

        assert view.itinerary_id == str(itinerary.id)
        assert view.author == "alice"
        assert sorted(view.collaborators) == ["bob", "carol"]
        assert view.content == "Rome 3 days"

    @pytest.mark.asyncio
    async def test_unknown_collaborator_shown_as_deleted_user(self, unit_env):
        aggregator = await unit_env.get(ResponseAggregator)
        user_service = await unit_env.get(UserService)
        alice = await user_service.create(Username("alice"))
        itinerary = make_itinerary(alice.id, collaborators=frozenset({UserId(uuid4())}))

        view = await aggregator.project_itinerary(itinerary)

        assert view.collaborators == [DELETED_USER]

    @pytest.mark.asyncio
    async def test_missing_author_raises_not_found(self, unit_env):
        aggregator = await unit_env.get(ResponseAggregator)

        with pytest.raises(NotFoundError):
            await aggregator.project_itinerary(make_itinerary(UserId(uuid4())))


class TestProjectPost:
    """Tests for summarize_post, project_post and project_posts."""

    @pytest.mark.asyncio
    async def test_post_view_embeds_itinerary(self, unit_env):
        aggregator = await unit_env.get(ResponseAggregator)
        user_service = await unit_env.get(UserService)
        itinerary_repo = await unit_env.get(ItineraryRepository)
        alice = await user_service.create(Username("alice"))
        itinerary = await itinerary_repo.save(make_itinerary(alice.id))
        post = make_post(alice.id, itinerary.id).model_copy(
            update={
                "options": PostOptions(background_color="teal"),
                "favorite_users": frozenset({UserId(uuid4()), UserId(uuid4())}),
            }
        )

        view = await aggregator.project_post(post)

        assert view.author == "alice"
        assert view.favorite_count == 2
        assert view.options == PostOptions(background_color="teal")
        assert view.itinerary is not None
        assert view.itinerary.itinerary_id == str(itinerary.id)
        assert view.itinerary_id == str(itinerary.id)

    @pytest.mark.asyncio
    async def test_orphaned_post_has_no_itinerary(self, unit_env):
        aggregator = await unit_env.get(ResponseAggregator)
        user_service = await unit_env.get(UserService)
        itinerary_service = await unit_env.get(ItineraryService)
        alice = await user_service.create(Username("alice"))
        itinerary = await itinerary_service.create(alice.id, "Rome 3 days")
        post = make_post(alice.id, itinerary.id)
        await itinerary_service.delete(itinerary.id)

        view = await aggregator.project_post(post)

        assert view.itinerary is None
        assert view.itinerary_id == str(itinerary.id)
        assert view.title == post.title

    @pytest.mark.asyncio
    async def test_batch_keeps_order(self, unit_env):
        aggregator = await unit_env.get(ResponseAggregator)
        user_service = await unit_env.get(UserService)
        itinerary_repo = await unit_env.get(ItineraryRepository)
        alice = await user_service.create(Username("alice"))
        itinerary = await itinerary_repo.save(make_itinerary(alice.id))
        posts = [
            make_post(alice.id, itinerary.id, title=title)
            for title in ("Rome", "Paris", "Oslo")
        ]

        views = await aggregator.project_posts(posts)

        assert [v.title for v in views] == ["Rome", "Paris", "Oslo"]

    @pytest.mark.asyncio
    async def test_batch_fails_as_a_whole(self, unit_env):
        aggregator = await unit_env.get(ResponseAggregator)
        user_service = await unit_env.get(UserService)
        itinerary_repo = await unit_env.get(ItineraryRepository)
        alice = await user_service.create(Username("alice"))
        itinerary = await itinerary_repo.save(make_itinerary(alice.id))
        posts = [
            make_post(alice.id, itinerary.id),
            make_post(UserId(uuid4()), itinerary.id),
        ]

        with pytest.raises(NotFoundError):
            await aggregator.project_posts(posts)

    @pytest.mark.asyncio
    async def test_summary_skips_itinerary_lookup(self, unit_env):
        aggregator = await unit_env.get(ResponseAggregator)
        user_service = await unit_env.get(UserService)
        post_repo = await unit_env.get(PostRepository)
        alice = await user_service.create(Username("alice"))
        post = await post_repo.save(make_post(alice.id, make_itinerary(alice.id).id))

        summary = await aggregator.summarize_post(post)

        assert summary.post_id == str(post.id)
        assert not hasattr(summary, "itinerary")
