"""Update post use case."""

from typing import Any
from uuid import UUID

from pydantic import BaseModel

from roam.application.projection import PostView, ResponseAggregator
from roam.application.usecase.base import BaseUseCase
from roam.domain.service import PostService
from roam.domain.value import ItineraryId, PostId, PostOptions, UserId


class UpdatePostRequest(BaseModel):
    """Update post request.

    Fields left as None are not changed.
    """

    post_id: str  # UUID string
    user_id: str  # Acting user (must be author)
    title: str | None = None
    tags: str | None = None
    rating: float | None = None
    itinerary_id: str | None = None  # UUID string
    options: PostOptions | None = None


class UpdatePostResponse(BaseModel):
    """Update post response."""

    msg: str
    post: PostView


class UpdatePostUseCase(BaseUseCase[UpdatePostRequest, UpdatePostResponse]):
    """Use case for editing a post."""

    def __init__(
        self, post_service: PostService, response_aggregator: ResponseAggregator
    ) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
            response_aggregator: Builds the post view
        """
        self.post_service = post_service
        self.response_aggregator = response_aggregator

    async def execute(self, request: UpdatePostRequest) -> UpdatePostResponse:
        """Execute update post flow.

        Raises:
            NotFoundError: If the post or new itinerary doesn't exist
            NotAuthorizedError: If the user is not the author
            InvalidArgumentError: If no field is given
        """
        post_id = PostId(UUID(request.post_id))
        user_id = UserId(UUID(request.user_id))

        # 1. Check authorization before touching anything
        await self.post_service.assert_author(post_id, user_id)

        # 2. Collect only the fields the caller supplied
        changes: dict[str, Any] = request.model_dump(
            include={"title", "tags", "rating", "options"}, exclude_none=True
        )
        if request.itinerary_id is not None:
            changes["itinerary_id"] = ItineraryId(UUID(request.itinerary_id))

        # 3. Update via service
        post = await self.post_service.update(post_id, changes)

        return UpdatePostResponse(
            msg="Post successfully updated!",
            post=await self.response_aggregator.project_post(post),
        )
