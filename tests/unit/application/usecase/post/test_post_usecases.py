"""Unit tests for the post use cases."""

from uuid import UUID, uuid4

import pytest
from pydantic import ValidationError

from roam.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from roam.domain.error import InvalidArgumentError, NotAuthorizedError, NotFoundError
from roam.domain.service import ItineraryService, UserService
from roam.domain.value import PostOptions, UserId, Username
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _author_with_itinerary(env, username: str) -> tuple[str, str]:
    user_service = await env.get(UserService)
    itinerary_service = await env.get(ItineraryService)
    user = await user_service.create(Username(username))
    itinerary = await itinerary_service.create(user.id, f"{username}'s plan")
    return str(user.id), str(itinerary.id)


async def _publish(env, user_id: str, itinerary_id: str, title: str) -> str:
    create = await env.get(CreatePostUseCase)
    response = await create.execute(
        CreatePostRequest(
            user_id=user_id, title=title, rating=4, itinerary_id=itinerary_id
        )
    )
    return response.post.post_id


class TestCreatePost:
    """Tests for CreatePostUseCase."""

    @pytest.mark.asyncio
    async def test_create_projects_itinerary(self, unit_env):
        alice, itinerary_id = await _author_with_itinerary(unit_env, "alice")
        create = await unit_env.get(CreatePostUseCase)

        response = await create.execute(
            CreatePostRequest(
                user_id=alice,
                title="My Rome Trip",
                tags="rome,history",
                rating=4.5,
                itinerary_id=itinerary_id,
                options=PostOptions(background_color="#112233"),
            )
        )

        assert response.msg == "Post successfully created!"
        assert response.post.author == "alice"
        assert response.post.favorite_count == 0
        assert response.post.itinerary.itinerary_id == itinerary_id
        assert response.post.options.background_color == "#112233"

    @pytest.mark.asyncio
    async def test_unknown_itinerary(self, unit_env):
        alice, _ = await _author_with_itinerary(unit_env, "alice")
        create = await unit_env.get(CreatePostUseCase)

        with pytest.raises(NotFoundError):
            await create.execute(
                CreatePostRequest(
                    user_id=alice, title="Lost", rating=1, itinerary_id=str(uuid4())
                )
            )

    def test_rating_validated_on_request(self):
        with pytest.raises(ValidationError):
            CreatePostRequest(
                user_id=str(uuid4()), title="x", rating=9, itinerary_id=str(uuid4())
            )


class TestUpdatePost:
    """Tests for UpdatePostUseCase."""

    @pytest.mark.asyncio
    async def test_author_updates_some_fields(self, unit_env):
        alice, itinerary_id = await _author_with_itinerary(unit_env, "alice")
        post_id = await _publish(unit_env, alice, itinerary_id, "Rome")
        update = await unit_env.get(UpdatePostUseCase)

        response = await update.execute(
            UpdatePostRequest(post_id=post_id, user_id=alice, title="Rome, again")
        )

        assert response.msg == "Post successfully updated!"
        assert response.post.title == "Rome, again"
        assert response.post.rating == 4

    @pytest.mark.asyncio
    async def test_non_author_rejected(self, unit_env):
        alice, itinerary_id = await _author_with_itinerary(unit_env, "alice")
        bob, _ = await _author_with_itinerary(unit_env, "bob")
        post_id = await _publish(unit_env, alice, itinerary_id, "Rome")
        update = await unit_env.get(UpdatePostUseCase)

        with pytest.raises(NotAuthorizedError):
            await update.execute(
                UpdatePostRequest(post_id=post_id, user_id=bob, title="Bob's now")
            )

    @pytest.mark.asyncio
    async def test_empty_update_rejected(self, unit_env):
        alice, itinerary_id = await _author_with_itinerary(unit_env, "alice")
        post_id = await _publish(unit_env, alice, itinerary_id, "Rome")
        update = await unit_env.get(UpdatePostUseCase)

        with pytest.raises(InvalidArgumentError):
            await update.execute(UpdatePostRequest(post_id=post_id, user_id=alice))

    @pytest.mark.asyncio
    async def test_move_to_another_itinerary(self, unit_env):
        alice, first = await _author_with_itinerary(unit_env, "alice")
        itinerary_service = await unit_env.get(ItineraryService)
        post_id = await _publish(unit_env, alice, first, "Rome")

        second = await itinerary_service.create(UserId(UUID(alice)), "Plan B")
        update = await unit_env.get(UpdatePostUseCase)

        response = await update.execute(
            UpdatePostRequest(
                post_id=post_id, user_id=alice, itinerary_id=str(second.id)
            )
        )

        assert response.post.itinerary.content == "Plan B"


class TestListPosts:
    """Tests for the ListPostsUseCase filter dispatch."""

    @pytest.mark.asyncio
    async def test_each_filter_combination(self, unit_env):
        alice, alice_itinerary = await _author_with_itinerary(unit_env, "alice")
        bob, bob_itinerary = await _author_with_itinerary(unit_env, "bob")
        await _publish(unit_env, alice, alice_itinerary, "Paris Trip")
        await _publish(unit_env, alice, alice_itinerary, "Rome Trip")
        await _publish(unit_env, bob, bob_itinerary, "Paris in spring")
        list_posts = await unit_env.get(ListPostsUseCase)

        async def titles(**filters) -> set[str]:
            response = await list_posts.execute(ListPostsRequest(**filters))
            return {p.title for p in response.posts}

        assert await titles() == {"Paris Trip", "Rome Trip", "Paris in spring"}
        assert await titles(author="alice") == {"Paris Trip", "Rome Trip"}
        assert await titles(title="paris") == {"Paris Trip", "Paris in spring"}
        assert await titles(author="alice", title="PARIS") == {"Paris Trip"}
        assert await titles(title="london") == set()

    @pytest.mark.asyncio
    async def test_unknown_author_filter(self, unit_env):
        list_posts = await unit_env.get(ListPostsUseCase)

        with pytest.raises(NotFoundError):
            await list_posts.execute(ListPostsRequest(author="ghost"))


class TestGetAndDeletePost:
    """Tests for GetPostUseCase and DeletePostUseCase."""

    @pytest.mark.asyncio
    async def test_only_author_deletes(self, unit_env):
        alice, itinerary_id = await _author_with_itinerary(unit_env, "alice")
        bob, _ = await _author_with_itinerary(unit_env, "bob")
        post_id = await _publish(unit_env, alice, itinerary_id, "Rome")
        delete = await unit_env.get(DeletePostUseCase)
        get = await unit_env.get(GetPostUseCase)

        with pytest.raises(NotAuthorizedError):
            await delete.execute(DeletePostRequest(post_id=post_id, user_id=bob))
        assert (await get.execute(GetPostRequest(post_id=post_id))).title == "Rome"

        response = await delete.execute(
            DeletePostRequest(post_id=post_id, user_id=alice)
        )

        assert response.msg == "Post deleted successfully!"
        with pytest.raises(NotFoundError):
            await get.execute(GetPostRequest(post_id=post_id))
