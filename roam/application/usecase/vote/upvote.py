"""Upvote use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from roam.application.usecase.base import BaseUseCase
from roam.domain.service import UserService, VoteService
from roam.domain.value import PostId, UserId


class UpvoteRequest(BaseModel):
    """Upvote request."""

    post_id: str  # UUID string
    user_id: str  # User ID of the voter


class UpvoteResponse(BaseModel):
    """Upvote response."""

    msg: str
    vote_id: str
    post_id: str
    upvotes: int
    created_at: datetime


class UpvoteUseCase(BaseUseCase[UpvoteRequest, UpvoteResponse]):
    """Use case for upvoting a post."""

    def __init__(self, vote_service: VoteService, user_service: UserService) -> None:
        """Initialize upvote use case.

        Args:
            vote_service: Vote domain service
            user_service: User domain service
        """
        self.vote_service = vote_service
        self.user_service = user_service

    async def execute(self, request: UpvoteRequest) -> UpvoteResponse:
        """Execute upvote flow.

        Args:
            request: Upvote request

        Returns:
            Upvote response with vote details and the new tally

        Raises:
            NotFoundError: If the user or post doesn't exist
            AlreadyVotedError: If the user already upvoted the post
        """
        user_id = UserId(UUID(request.user_id))
        post_id = PostId(UUID(request.post_id))
        await self.user_service.get_by_id(user_id)  # Raises NotFoundError

        vote = await self.vote_service.upvote(post_id, user_id)

        return UpvoteResponse(
            msg="Post upvoted!",
            vote_id=str(vote.id),
            post_id=str(vote.post_id),
            upvotes=await self.vote_service.count(post_id),
            created_at=vote.created_at,
        )
