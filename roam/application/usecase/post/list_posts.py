"""List posts use case."""

import logfire
from pydantic import BaseModel

from roam.application.projection import PostView, ResponseAggregator
from roam.application.usecase.base import BaseUseCase
from roam.domain.service import PostService, UserService
from roam.domain.value import Username


class ListPostsRequest(BaseModel):
    """List posts request."""

    author: str | None = None  # Filter by author username
    title: str | None = None  # Case-insensitive title substring


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostView]


class ListPostsUseCase(BaseUseCase[ListPostsRequest, ListPostsResponse]):
    """Use case for listing posts, optionally filtered by author and title."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        response_aggregator: ResponseAggregator,
    ) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
            response_aggregator: Builds the post views
        """
        self.post_service = post_service
        self.user_service = user_service
        self.response_aggregator = response_aggregator

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Raises:
            NotFoundError: If the author filter names an unknown user
        """
        with logfire.span(
            "list_posts.execute", author=request.author, title=request.title
        ):
            if request.author:
                author = await self.user_service.get_by_username(
                    Username(request.author)
                )
                if request.title:
                    posts = await self.post_service.get_by_author_and_title(
                        author.id, request.title
                    )
                else:
                    posts = await self.post_service.get_by_author(author.id)
            elif request.title:
                posts = await self.post_service.get_by_title(request.title)
            else:
                posts = await self.post_service.get_all()

            views = await self.response_aggregator.project_posts(posts)
            logfire.info("Posts listed", count=len(views))

            return ListPostsResponse(posts=views)
