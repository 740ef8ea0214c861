"""List users use case."""

from pydantic import BaseModel

from roam.application.usecase.base import BaseUseCase
from roam.domain.service import UserService

from .get_user import UserItem


class ListUsersRequest(BaseModel):
    """List users request (no filters)."""


class ListUsersResponse(BaseModel):
    """List users response."""

    users: list[UserItem]


class ListUsersUseCase(BaseUseCase[ListUsersRequest, ListUsersResponse]):
    """Use case for listing every user."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize list users use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: ListUsersRequest) -> ListUsersResponse:
        """Execute list users flow."""
        users = await self.user_service.get_all()

        return ListUsersResponse(
            users=[
                UserItem(
                    user_id=str(user.id),
                    username=user.username.root,
                    created_at=user.created_at,
                )
                for user in users
            ]
        )
