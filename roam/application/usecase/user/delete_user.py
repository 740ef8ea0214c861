"""Delete user use case."""

from uuid import UUID

from pydantic import BaseModel

from roam.application.usecase.base import BaseUseCase
from roam.domain.service import UserService
from roam.domain.value import UserId


class DeleteUserRequest(BaseModel):
    """Delete user request."""

    user_id: str  # Acting user, deletes their own account


class DeleteUserResponse(BaseModel):
    """Delete user response."""

    msg: str


class DeleteUserUseCase(BaseUseCase[DeleteUserRequest, DeleteUserResponse]):
    """Use case for deleting the acting user's account."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize delete user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: DeleteUserRequest) -> DeleteUserResponse:
        """Execute delete user flow."""
        await self.user_service.delete(UserId(UUID(request.user_id)))
        return DeleteUserResponse(msg="User deleted!")
