"""Add favorite use case."""

from uuid import UUID

from pydantic import BaseModel

from roam.application.usecase.base import BaseUseCase
from roam.domain.service import PostService, UserService
from roam.domain.value import PostId, UserId


class AddFavoriteRequest(BaseModel):
    """Add favorite request."""

    post_id: str  # UUID string
    user_id: str  # Acting user


class AddFavoriteResponse(BaseModel):
    """Add favorite response.

    ``added`` is False when the post was already a favorite.
    """

    msg: str
    added: bool


class AddFavoriteUseCase(BaseUseCase[AddFavoriteRequest, AddFavoriteResponse]):
    """Use case for favoriting a post."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize add favorite use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: AddFavoriteRequest) -> AddFavoriteResponse:
        """Execute add favorite flow.

        Raises:
            NotFoundError: If the user or post doesn't exist
        """
        user_id = UserId(UUID(request.user_id))
        await self.user_service.get_by_id(user_id)  # Raises NotFoundError

        added = await self.post_service.add_favorite(
            PostId(UUID(request.post_id)), user_id
        )

        if added:
            return AddFavoriteResponse(msg="User added to favorites", added=True)
        return AddFavoriteResponse(
            msg="User has already favorited this post", added=False
        )
