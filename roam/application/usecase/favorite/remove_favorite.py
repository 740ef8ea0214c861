"""Remove favorite use case."""

from uuid import UUID

from pydantic import BaseModel

from roam.application.usecase.base import BaseUseCase
from roam.domain.service import PostService
from roam.domain.value import PostId, UserId


class RemoveFavoriteRequest(BaseModel):
    """Remove favorite request."""

    post_id: str  # UUID string
    user_id: str  # Acting user


class RemoveFavoriteResponse(BaseModel):
    """Remove favorite response.

    ``removed`` is False when the post was not a favorite.
    """

    msg: str
    removed: bool


class RemoveFavoriteUseCase(BaseUseCase[RemoveFavoriteRequest, RemoveFavoriteResponse]):
    """Use case for unfavoriting a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize remove favorite use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: RemoveFavoriteRequest) -> RemoveFavoriteResponse:
        """Execute remove favorite flow.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        removed = await self.post_service.remove_favorite(
            PostId(UUID(request.post_id)), UserId(UUID(request.user_id))
        )

        if removed:
            return RemoveFavoriteResponse(
                msg="User removed from favorites", removed=True
            )
        return RemoveFavoriteResponse(
            msg="User has not favorited this post", removed=False
        )
