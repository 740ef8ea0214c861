"""Post repository interface."""

from abc import abstractmethod
from typing import List, Optional

from roam.domain.model.post import Post
from roam.domain.repository.base import EntityRepository
from roam.domain.value import PostId, UserId


class PostRepository(EntityRepository[Post, PostId]):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_all(self) -> List[Post]:
        """Find all posts, most recently created first.

        Returns:
            List of posts sorted by created_at descending
        """
        pass

    @abstractmethod
    async def find_by_author(self, author_id: UserId) -> List[Post]:
        """Find posts by a specific author.

        Args:
            author_id: The author's user ID

        Returns:
            List of posts by the author, most recent first
        """
        pass

    @abstractmethod
    async def find_by_title(
        self, pattern: str, author_id: Optional[UserId] = None
    ) -> List[Post]:
        """Find posts whose title contains ``pattern``, ignoring case.

        The pattern is matched literally (no wildcard or regex syntax).

        Args:
            pattern: Substring to look for in titles
            author_id: Restrict to this author's posts (None for all authors)

        Returns:
            Matching posts, most recent first
        """
        pass

    @abstractmethod
    async def find_favorited_by(self, user_id: UserId) -> List[Post]:
        """Find posts a user has favorited.

        Args:
            user_id: The user's ID

        Returns:
            Posts whose favorite_users contain the user, most recent first
        """
        pass

    @abstractmethod
    async def add_favorite_user(self, post_id: PostId, user_id: UserId) -> bool:
        """Atomically add a user to a post's favorite_users.

        Args:
            post_id: The post ID
            user_id: The user favoriting the post

        Returns:
            True if the user was added, False if already present
            or the post doesn't exist
        """
        pass

    @abstractmethod
    async def remove_favorite_user(self, post_id: PostId, user_id: UserId) -> bool:
        """Atomically remove a user from a post's favorite_users.

        Args:
            post_id: The post ID
            user_id: The user to remove

        Returns:
            True if the user was removed, False if they weren't present
        """
        pass
