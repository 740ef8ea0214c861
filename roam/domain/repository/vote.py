"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from roam.domain.model.vote import Vote
from roam.domain.value import PostId, UserId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Votes are created and counted, never updated.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_post_and_user(
        self, post_id: PostId, user_id: UserId
    ) -> Optional[Vote]:
        """Find a user's vote on a post.

        Args:
            post_id: The post ID
            user_id: The user's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create).

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            IntegrityError: If the user already voted on the post (duplicate)
        """
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId) -> int:
        """Count votes on a post.

        Args:
            post_id: The post ID

        Returns:
            Number of distinct users who voted
        """
        pass
