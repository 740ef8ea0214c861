"""Delete post use case."""

from uuid import UUID

from pydantic import BaseModel

from roam.application.usecase.base import BaseUseCase
from roam.domain.service import PostService
from roam.domain.value import PostId, UserId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str  # UUID string
    user_id: str  # Acting user (must be author)


class DeletePostResponse(BaseModel):
    """Delete post response."""

    msg: str


class DeletePostUseCase(BaseUseCase[DeletePostRequest, DeletePostResponse]):
    """Use case for deleting a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the user is not the author
        """
        post_id = PostId(UUID(request.post_id))

        await self.post_service.assert_author(post_id, UserId(UUID(request.user_id)))
        await self.post_service.delete(post_id)

        return DeletePostResponse(msg="Post deleted successfully!")
