"""In-memory vote repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from roam.domain.model.vote import Vote
from roam.domain.repository.vote import VoteRepository
from roam.domain.value import PostId, UserId


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: list[Vote] = []

    async def find_by_post_and_user(
        self, post_id: PostId, user_id: UserId
    ) -> Optional[Vote]:
        """Find a user's vote on a post."""
        for vote in self._votes:
            if vote.post_id == post_id and vote.user_id == user_id:
                return vote
        return None

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If vote already exists (duplicate)
        """
        # Check for duplicate
        existing = await self.find_by_post_and_user(vote.post_id, vote.user_id)
        if existing:
            raise IntegrityError("Duplicate vote", None, Exception())

        self._votes.append(vote)
        return vote

    async def count_by_post(self, post_id: PostId) -> int:
        """Count votes on a post."""
        return sum(1 for v in self._votes if v.post_id == post_id)
