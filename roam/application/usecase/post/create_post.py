"""Create post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from roam.application.projection import PostView, ResponseAggregator
from roam.application.usecase.base import BaseUseCase
from roam.domain.service import PostService, UserService
from roam.domain.value import ItineraryId, PostOptions, UserId


class CreatePostRequest(BaseModel):
    """Create post request."""

    user_id: str  # Acting user, becomes the author
    title: str
    tags: str = ""
    rating: float = Field(ge=0, le=5)
    itinerary_id: str  # UUID string
    options: PostOptions | None = None


class CreatePostResponse(BaseModel):
    """Create post response."""

    msg: str
    post: PostView


class CreatePostUseCase(BaseUseCase[CreatePostRequest, CreatePostResponse]):
    """Use case for publishing an itinerary as a post."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        response_aggregator: ResponseAggregator,
    ) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
            response_aggregator: Builds the post view
        """
        self.post_service = post_service
        self.user_service = user_service
        self.response_aggregator = response_aggregator

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Steps:
        1. Check the author exists (via UserService)
        2. Create the post; PostService checks the itinerary exists
        3. Project the post with its itinerary

        Raises:
            NotFoundError: If the user or itinerary doesn't exist
            ValidationError: If post fields are invalid
        """
        author_id = UserId(UUID(request.user_id))
        await self.user_service.get_by_id(author_id)  # Raises NotFoundError

        with logfire.span(
            "create_post.execute",
            title=request.title,
            itinerary_id=request.itinerary_id,
            author_id=request.user_id,
        ):
            post = await self.post_service.create(
                author_id=author_id,
                title=request.title,
                tags=request.tags,
                rating=request.rating,
                itinerary_id=ItineraryId(UUID(request.itinerary_id)),
                options=request.options,
            )

            return CreatePostResponse(
                msg="Post successfully created!",
                post=await self.response_aggregator.project_post(post),
            )
