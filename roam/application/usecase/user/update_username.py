"""Update username use case."""

from uuid import UUID

from pydantic import BaseModel

from roam.application.usecase.base import BaseUseCase
from roam.domain.service import UserService
from roam.domain.value import UserId, Username

from .get_user import UserItem


class UpdateUsernameRequest(BaseModel):
    """Update username request."""

    user_id: str  # Acting user, renames themselves
    username: str


class UpdateUsernameResponse(BaseModel):
    """Update username response."""

    msg: str
    user: UserItem


class UpdateUsernameUseCase(BaseUseCase[UpdateUsernameRequest, UpdateUsernameResponse]):
    """Use case for renaming the acting user.

    Views resolve usernames at read time, so existing itineraries and posts
    show the new name straight away.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize update username use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateUsernameRequest) -> UpdateUsernameResponse:
        """Execute update username flow.

        Raises:
            ValidationError: If the username is malformed
            NotFoundError: If the acting user doesn't exist
            InvalidArgumentError: If another user has that username
        """
        user = await self.user_service.update_username(
            UserId(UUID(request.user_id)), Username(request.username)
        )

        return UpdateUsernameResponse(
            msg="Updated user successfully!",
            user=UserItem(
                user_id=str(user.id),
                username=user.username.root,
                created_at=user.created_at,
            ),
        )
