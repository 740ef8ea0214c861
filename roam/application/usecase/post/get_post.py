"""Get post use case."""

from uuid import UUID

from pydantic import BaseModel

from roam.application.projection import PostView, ResponseAggregator
from roam.application.usecase.base import BaseUseCase
from roam.domain.service import PostService
from roam.domain.value import PostId


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str  # UUID string


class GetPostUseCase(BaseUseCase[GetPostRequest, PostView]):
    """Use case for reading one post with its itinerary."""

    def __init__(
        self, post_service: PostService, response_aggregator: ResponseAggregator
    ) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            response_aggregator: Builds the post view
        """
        self.post_service = post_service
        self.response_aggregator = response_aggregator

    async def execute(self, request: GetPostRequest) -> PostView:
        """Execute get post flow.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        post = await self.post_service.get_by_id(PostId(UUID(request.post_id)))
        return await self.response_aggregator.project_post(post)
