"""List favorites use case."""

from uuid import UUID

from pydantic import BaseModel

from roam.application.projection import PostSummary, ResponseAggregator
from roam.application.usecase.base import BaseUseCase
from roam.domain.service import PostService
from roam.domain.value import UserId


class ListFavoritesRequest(BaseModel):
    """List favorites request."""

    user_id: str  # Acting user


class ListFavoritesResponse(BaseModel):
    """List favorites response."""

    msg: str
    favorites: list[PostSummary]


class ListFavoritesUseCase(BaseUseCase[ListFavoritesRequest, ListFavoritesResponse]):
    """Use case for listing the posts a user has favorited."""

    def __init__(
        self, post_service: PostService, response_aggregator: ResponseAggregator
    ) -> None:
        """Initialize list favorites use case.

        Args:
            post_service: Post domain service
            response_aggregator: Builds the post summaries
        """
        self.post_service = post_service
        self.response_aggregator = response_aggregator

    async def execute(self, request: ListFavoritesRequest) -> ListFavoritesResponse:
        """Execute list favorites flow."""
        posts = await self.post_service.get_favorited_by(UserId(UUID(request.user_id)))
        if not posts:
            return ListFavoritesResponse(msg="You have no favorites!", favorites=[])

        favorites = [await self.response_aggregator.summarize_post(p) for p in posts]

        return ListFavoritesResponse(
            msg="These are your favorite posts", favorites=favorites
        )
