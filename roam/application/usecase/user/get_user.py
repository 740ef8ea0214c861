"""Get user use case."""

from datetime import datetime

from pydantic import BaseModel

from roam.application.usecase.base import BaseUseCase
from roam.domain.service import UserService
from roam.domain.value import Username


class GetUserRequest(BaseModel):
    """Get user request."""

    username: str


class UserItem(BaseModel):
    """Public user information."""

    user_id: str
    username: str
    created_at: datetime


class GetUserUseCase(BaseUseCase[GetUserRequest, UserItem]):
    """Use case for looking up a user by username."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserRequest) -> UserItem:
        """Execute get user flow.

        Raises:
            NotFoundError: If no user has that username
        """
        user = await self.user_service.get_by_username(Username(request.username))

        return UserItem(
            user_id=str(user.id),
            username=user.username.root,
            created_at=user.created_at,
        )
