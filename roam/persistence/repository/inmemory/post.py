"""In-memory post repository for testing."""

from typing import Optional

from roam.domain.model.post import Post
from roam.domain.repository.post import PostRepository
from roam.domain.value import PostId, UserId

from .base import InMemoryEntityRepository


class InMemoryPostRepository(InMemoryEntityRepository[Post, PostId], PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def _recent_first(self, posts: list[Post]) -> list[Post]:
        return sorted(posts, key=lambda p: p.created_at, reverse=True)

    async def find_all(self) -> list[Post]:
        """Find all posts, newest first."""
        return self._recent_first(list(self._entities.values()))

    async def find_by_author(self, author_id: UserId) -> list[Post]:
        """Find posts by a specific author."""
        return self._recent_first(
            [p for p in self._entities.values() if p.author_id == author_id]
        )

    async def find_by_title(
        self, pattern: str, author_id: Optional[UserId] = None
    ) -> list[Post]:
        """Find posts whose title contains the pattern, ignoring case."""
        needle = pattern.casefold()
        posts = [p for p in self._entities.values() if needle in p.title.casefold()]

        # Filter by author
        if author_id is not None:
            posts = [p for p in posts if p.author_id == author_id]

        return self._recent_first(posts)

    async def find_favorited_by(self, user_id: UserId) -> list[Post]:
        """Find posts a user has favorited."""
        return self._recent_first(
            [p for p in self._entities.values() if user_id in p.favorite_users]
        )

    async def add_favorite_user(self, post_id: PostId, user_id: UserId) -> bool:
        """Add a favorite user if not already present."""
        post = self._entities.get(post_id)
        if post is None or user_id in post.favorite_users:
            return False

        self._entities[post_id] = post.model_copy(
            update={"favorite_users": post.favorite_users | {user_id}}
        )
        return True

    async def remove_favorite_user(self, post_id: PostId, user_id: UserId) -> bool:
        """Remove a favorite user if present."""
        post = self._entities.get(post_id)
        if post is None or user_id not in post.favorite_users:
            return False

        self._entities[post_id] = post.model_copy(
            update={"favorite_users": post.favorite_users - {user_id}}
        )
        return True
