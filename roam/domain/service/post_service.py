"""Post domain service."""

from datetime import datetime
from typing import Any, Mapping
from uuid import uuid4

import logfire

from roam.domain.error import InvalidArgumentError, NotAuthorizedError, NotFoundError
from roam.domain.model import Post
from roam.domain.repository import PostRepository
from roam.domain.value import ItineraryId, PostId, PostOptions, UserId

from .base import Service
from .itinerary_service import ItineraryService

# Fields a post update may touch; author and favorites are managed elsewhere
EDITABLE_FIELDS = frozenset({"title", "tags", "rating", "itinerary_id", "options"})


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self,
        post_repository: PostRepository,
        itinerary_service: ItineraryService,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            itinerary_service: Itinerary domain service, used to check references
        """
        self.post_repository = post_repository
        self.itinerary_service = itinerary_service

    async def create(
        self,
        author_id: UserId,
        title: str,
        tags: str,
        rating: float,
        itinerary_id: ItineraryId,
        options: PostOptions | None = None,
    ) -> Post:
        """Create a post referencing an existing itinerary.

        Args:
            author_id: Author's user ID
            title: Post title
            tags: Free-form tags
            rating: Rating from 0 to 5
            itinerary_id: Itinerary the post publishes
            options: Presentation options

        Returns:
            Created post

        Raises:
            NotFoundError: If the itinerary doesn't exist
        """
        with logfire.span(
            "post_service.create",
            author_id=str(author_id),
            title=title,
            itinerary_id=str(itinerary_id),
        ):
            await self.itinerary_service.get_by_id(itinerary_id)

            now = datetime.now()
            post = Post(
                id=PostId(uuid4()),
                author_id=author_id,
                title=title,
                tags=tags,
                rating=rating,
                itinerary_id=itinerary_id,
                options=options,
                favorite_users=frozenset(),
                created_at=now,
                updated_at=now,
            )
            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id))
            return saved

    async def get_by_id(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Raises:
            NotFoundError: If post not found
        """
        with logfire.span("post_service.get_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            return post

    async def get_all(self) -> list[Post]:
        """List all posts, newest first."""
        with logfire.span("post_service.get_all"):
            posts = await self.post_repository.find_all()
            logfire.info("Posts listed", count=len(posts))
            return posts

    async def get_by_author(self, author_id: UserId) -> list[Post]:
        """List an author's posts, newest first."""
        with logfire.span("post_service.get_by_author", author_id=str(author_id)):
            return await self.post_repository.find_by_author(author_id)

    async def get_by_author_and_title(
        self, author_id: UserId, title_pattern: str
    ) -> list[Post]:
        """List an author's posts whose title contains the pattern (any case)."""
        with logfire.span(
            "post_service.get_by_author_and_title",
            author_id=str(author_id),
            title_pattern=title_pattern,
        ):
            return await self.post_repository.find_by_title(
                title_pattern, author_id=author_id
            )

    async def get_by_title(self, title_pattern: str) -> list[Post]:
        """List posts whose title contains the pattern (any case)."""
        with logfire.span("post_service.get_by_title", title_pattern=title_pattern):
            return await self.post_repository.find_by_title(title_pattern)

    async def get_by_ids(self, post_ids: list[PostId]) -> list[Post]:
        """Batch lookup of posts. Unknown IDs are skipped."""
        if not post_ids:
            return []
        return await self.post_repository.find_by_ids(post_ids)

    async def update(self, post_id: PostId, changes: Mapping[str, Any]) -> Post:
        """Partially update a post.

        Only the fields present in ``changes`` are written. A new
        itinerary_id must resolve before anything is written.

        Args:
            post_id: Post ID
            changes: Field name to new value (title, tags, rating,
                itinerary_id, options)

        Returns:
            Updated post

        Raises:
            InvalidArgumentError: If there is nothing to change or a field
                can't be edited
            NotFoundError: If the post or the new itinerary doesn't exist
        """
        with logfire.span(
            "post_service.update", post_id=str(post_id), fields=sorted(changes)
        ):
            if not changes:
                raise InvalidArgumentError(f"Nothing to update on post {post_id}")

            unknown = set(changes) - EDITABLE_FIELDS
            if unknown:
                raise InvalidArgumentError(
                    f"Cannot update {', '.join(sorted(unknown))} on post {post_id}"
                )

            current = await self.get_by_id(post_id)

            if "itinerary_id" in changes:
                await self.itinerary_service.get_by_id(changes["itinerary_id"])

            # Validate the result on a copy before writing
            candidate = Post.model_validate({**current.model_dump(), **changes})
            values = {field: getattr(candidate, field) for field in changes}
            values["updated_at"] = datetime.now()

            updated = await self.post_repository.update(post_id, values)
            if updated is None:
                logfire.warn("Post vanished during update", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            logfire.info("Post updated", post_id=str(post_id))
            return updated

    async def delete(self, post_id: PostId) -> None:
        """Delete a post. Safe to repeat."""
        with logfire.span("post_service.delete", post_id=str(post_id)):
            deleted = await self.post_repository.delete(post_id)
            logfire.info(
                "Post deleted" if deleted else "Post already absent",
                post_id=str(post_id),
            )

    async def assert_author(self, post_id: PostId, user_id: UserId) -> None:
        """Check that a user wrote a post.

        Raises:
            NotFoundError: If post not found
            NotAuthorizedError: If the user is not the author
        """
        post = await self.get_by_id(post_id)
        if not post.can_edit(user_id):
            logfire.warn(
                "Unauthorized post edit attempt",
                post_id=str(post_id),
                user_id=str(user_id),
            )
            raise NotAuthorizedError("post", str(post_id), str(user_id))

    async def add_favorite(self, post_id: PostId, user_id: UserId) -> bool:
        """Add a user to a post's favorites.

        Returns:
            True if added, False if the user had already favorited the post

        Raises:
            NotFoundError: If post not found
        """
        with logfire.span(
            "post_service.add_favorite", post_id=str(post_id), user_id=str(user_id)
        ):
            await self.get_by_id(post_id)

            added = await self.post_repository.add_favorite_user(post_id, user_id)
            logfire.info(
                "Favorite added" if added else "Favorite already present",
                post_id=str(post_id),
                user_id=str(user_id),
            )
            return added

    async def remove_favorite(self, post_id: PostId, user_id: UserId) -> bool:
        """Remove a user from a post's favorites.

        Returns:
            True if removed, False if the user hadn't favorited the post

        Raises:
            NotFoundError: If post not found
        """
        with logfire.span(
            "post_service.remove_favorite", post_id=str(post_id), user_id=str(user_id)
        ):
            await self.get_by_id(post_id)

            removed = await self.post_repository.remove_favorite_user(post_id, user_id)
            logfire.info(
                "Favorite removed" if removed else "Favorite not present",
                post_id=str(post_id),
                user_id=str(user_id),
            )
            return removed

    async def get_favorited_by(self, user_id: UserId) -> list[Post]:
        """Posts a user has favorited, newest post first."""
        with logfire.span("post_service.get_favorited_by", user_id=str(user_id)):
            posts = await self.post_repository.find_favorited_by(user_id)
            logfire.info("Favorites listed", user_id=str(user_id), count=len(posts))
            return posts

    async def view_favorites(self, user_id: UserId) -> list[PostId]:
        """IDs of the posts a user has favorited, newest post first."""
        return [post.id for post in await self.get_favorited_by(user_id)]
