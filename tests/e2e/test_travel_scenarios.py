"""End-to-end scenarios across users, itineraries, posts, favorites and votes.

These drive the use cases the way a transport layer would, with string IDs
in and views out. Persistence is in memory; run the same flows against
PostgreSQL with ``create_env_fixture(unmock={"persistence"})``.
"""

import pytest

from roam.application.usecase.favorite import (
    AddFavoriteRequest,
    AddFavoriteUseCase,
    ListFavoritesRequest,
    ListFavoritesUseCase,
)
from roam.application.usecase.itinerary import (
    CreateItineraryRequest,
    CreateItineraryUseCase,
    DeleteItineraryRequest,
    DeleteItineraryUseCase,
    UpdateItineraryRequest,
    UpdateItineraryUseCase,
)
from roam.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
)
from roam.application.usecase.user import CreateUserRequest, CreateUserUseCase
from roam.application.usecase.vote import (
    GetUpvoteCountRequest,
    GetUpvoteCountUseCase,
    UpvoteRequest,
    UpvoteUseCase,
)
from roam.domain.error import AlreadyVotedError, NotAuthorizedError
from tests.harness import create_env_fixture

e2e_env = create_env_fixture()


async def _register(env, *usernames: str) -> list[str]:
    create_user = await env.get(CreateUserUseCase)
    ids = []
    for username in usernames:
        response = await create_user.execute(CreateUserRequest(username=username))
        ids.append(response.user_id)
    return ids


async def _itinerary(env, user_id: str, content: str) -> str:
    create = await env.get(CreateItineraryUseCase)
    response = await create.execute(
        CreateItineraryRequest(user_id=user_id, content=content)
    )
    return response.itinerary.itinerary_id


async def _post(env, user_id: str, itinerary_id: str, title: str) -> str:
    create = await env.get(CreatePostUseCase)
    response = await create.execute(
        CreatePostRequest(
            user_id=user_id,
            title=title,
            tags="italy",
            rating=5,
            itinerary_id=itinerary_id,
        )
    )
    return response.post.post_id


class TestTravelScenarios:
    """Whole flows from registration to projection."""

    @pytest.mark.asyncio
    async def test_publish_and_favorite(self, e2e_env):
        alice, bob = await _register(e2e_env, "alice", "bob")
        itinerary_id = await _itinerary(e2e_env, alice, "Rome 3 days")
        post_id = await _post(e2e_env, alice, itinerary_id, "My Rome Trip")

        add_favorite = await e2e_env.get(AddFavoriteUseCase)
        list_favorites = await e2e_env.get(ListFavoritesUseCase)
        await add_favorite.execute(AddFavoriteRequest(post_id=post_id, user_id=bob))

        bobs = await list_favorites.execute(ListFavoritesRequest(user_id=bob))
        alices = await list_favorites.execute(ListFavoritesRequest(user_id=alice))

        assert [f.post_id for f in bobs.favorites] == [post_id]
        assert bobs.favorites[0].author == "alice"
        assert alices.msg == "You have no favorites!"

    @pytest.mark.asyncio
    async def test_collaborator_edits_and_stranger_is_refused(self, e2e_env):
        alice, bob, carol = await _register(e2e_env, "alice", "bob", "carol")
        itinerary_id = await _itinerary(e2e_env, alice, "Rome 3 days")
        update = await e2e_env.get(UpdateItineraryUseCase)

        await update.execute(
            UpdateItineraryRequest(
                itinerary_id=itinerary_id, user_id=alice, collaborator="bob"
            )
        )
        edited = await update.execute(
            UpdateItineraryRequest(
                itinerary_id=itinerary_id, user_id=bob, content="Rome 4 days"
            )
        )

        assert edited.itinerary.content == "Rome 4 days"
        assert edited.itinerary.author == "alice"
        assert edited.itinerary.collaborators == ["bob"]

        with pytest.raises(NotAuthorizedError):
            await update.execute(
                UpdateItineraryRequest(
                    itinerary_id=itinerary_id, user_id=carol, content="Carol's Rome"
                )
            )

    @pytest.mark.asyncio
    async def test_deleted_itinerary_leaves_post_without_itinerary(self, e2e_env):
        (alice,) = await _register(e2e_env, "alice")
        itinerary_id = await _itinerary(e2e_env, alice, "Rome 3 days")
        post_id = await _post(e2e_env, alice, itinerary_id, "My Rome Trip")
        delete = await e2e_env.get(DeleteItineraryUseCase)
        get_post = await e2e_env.get(GetPostUseCase)
        list_posts = await e2e_env.get(ListPostsUseCase)

        await delete.execute(
            DeleteItineraryRequest(itinerary_id=itinerary_id, user_id=alice)
        )
        view = await get_post.execute(GetPostRequest(post_id=post_id))
        listed = await list_posts.execute(ListPostsRequest(title="rome"))

        assert view.itinerary is None
        assert view.itinerary_id == itinerary_id
        assert [p.post_id for p in listed.posts] == [post_id]

    @pytest.mark.asyncio
    async def test_upvote_once_per_user(self, e2e_env):
        alice, bob, carol = await _register(e2e_env, "alice", "bob", "carol")
        itinerary_id = await _itinerary(e2e_env, alice, "Rome 3 days")
        post_id = await _post(e2e_env, alice, itinerary_id, "My Rome Trip")
        upvote = await e2e_env.get(UpvoteUseCase)
        count = await e2e_env.get(GetUpvoteCountUseCase)

        first = await upvote.execute(UpvoteRequest(post_id=post_id, user_id=bob))
        with pytest.raises(AlreadyVotedError):
            await upvote.execute(UpvoteRequest(post_id=post_id, user_id=bob))
        second = await upvote.execute(UpvoteRequest(post_id=post_id, user_id=carol))

        assert first.upvotes == 1
        assert second.upvotes == 2
        tally = await count.execute(GetUpvoteCountRequest(post_id=post_id))
        assert tally.msg == "Upvote count is 2"
