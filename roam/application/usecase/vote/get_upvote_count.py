"""Get upvote count use case."""

from uuid import UUID

from pydantic import BaseModel

from roam.application.usecase.base import BaseUseCase
from roam.domain.service import PostService, VoteService
from roam.domain.value import PostId


class GetUpvoteCountRequest(BaseModel):
    """Get upvote count request."""

    post_id: str  # UUID string


class GetUpvoteCountResponse(BaseModel):
    """Get upvote count response."""

    msg: str
    upvotes: int


class GetUpvoteCountUseCase(
    BaseUseCase[GetUpvoteCountRequest, GetUpvoteCountResponse]
):
    """Use case for reading a post's upvote tally."""

    def __init__(self, vote_service: VoteService, post_service: PostService) -> None:
        """Initialize get upvote count use case.

        Args:
            vote_service: Vote domain service
            post_service: Post domain service
        """
        self.vote_service = vote_service
        self.post_service = post_service

    async def execute(self, request: GetUpvoteCountRequest) -> GetUpvoteCountResponse:
        """Execute get upvote count flow.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        post_id = PostId(UUID(request.post_id))
        await self.post_service.get_by_id(post_id)  # Raises NotFoundError

        count = await self.vote_service.count(post_id)
        return GetUpvoteCountResponse(msg=f"Upvote count is {count}", upvotes=count)
