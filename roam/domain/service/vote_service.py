"""Vote domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from roam.domain.error import AlreadyVotedError
from roam.domain.model.vote import Vote
from roam.domain.repository import VoteRepository
from roam.domain.value import PostId, UserId, VoteId

from .base import Service
from .post_service import PostService


class VoteService(Service):
    """Domain service for vote operations.

    A user can upvote a post once. A second upvote is rejected rather than
    ignored, so callers can tell the user their vote was already counted.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        post_service: PostService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            post_service: Post domain service
        """
        self.vote_repository = vote_repository
        self.post_service = post_service

    async def upvote(self, post_id: PostId, user_id: UserId) -> Vote:
        """Upvote a post.

        Args:
            post_id: Post ID
            user_id: User ID

        Returns:
            Created vote

        Raises:
            NotFoundError: If post not found, including when it is deleted
                before the vote is written
            AlreadyVotedError: If the user already voted on this post
            IntegrityError: If the store rejects the vote for another reason,
                such as an unknown voter
        """
        with logfire.span("upvote_post", post_id=str(post_id), user_id=str(user_id)):
            # Check if post exists
            await self.post_service.get_by_id(post_id)

            # The unique (post, user) constraint rejects a second vote
            vote = Vote(
                id=VoteId(uuid4()),
                post_id=post_id,
                user_id=user_id,
                created_at=datetime.now(),
            )

            try:
                saved_vote = await self.vote_repository.save(vote)
            except IntegrityError:
                if await self.has_voted(post_id, user_id):
                    logfire.warn(
                        "Duplicate vote attempt",
                        user_id=str(user_id),
                        post_id=str(post_id),
                    )
                    raise AlreadyVotedError(str(post_id), str(user_id))

                # Not a duplicate: the post or voter went away before the insert
                logfire.warn(
                    "Vote insert rejected", user_id=str(user_id), post_id=str(post_id)
                )
                await self.post_service.get_by_id(post_id)
                raise

            logfire.info("Post upvoted", post_id=str(post_id), user_id=str(user_id))
            return saved_vote

    async def count(self, post_id: PostId) -> int:
        """Number of distinct users who upvoted a post."""
        with logfire.span("vote_service.count", post_id=str(post_id)):
            return await self.vote_repository.count_by_post(post_id)

    async def has_voted(self, post_id: PostId, user_id: UserId) -> bool:
        """Check whether a user has upvoted a post."""
        vote = await self.vote_repository.find_by_post_and_user(post_id, user_id)
        return vote is not None
