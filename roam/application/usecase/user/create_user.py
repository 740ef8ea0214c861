"""Create user use case."""

from datetime import datetime

from pydantic import BaseModel

from roam.application.usecase.base import BaseUseCase
from roam.domain.service import UserService
from roam.domain.value import Username


class CreateUserRequest(BaseModel):
    """Create user request."""

    username: str


class CreateUserResponse(BaseModel):
    """Create user response."""

    msg: str
    user_id: str
    username: str
    created_at: datetime


class CreateUserUseCase(BaseUseCase[CreateUserRequest, CreateUserResponse]):
    """Use case for registering a user."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize create user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: CreateUserRequest) -> CreateUserResponse:
        """Execute create user flow.

        Raises:
            ValidationError: If the username is malformed
            InvalidArgumentError: If the username is taken
        """
        user = await self.user_service.create(Username(request.username))

        return CreateUserResponse(
            msg="User created successfully!",
            user_id=str(user.id),
            username=user.username.root,
            created_at=user.created_at,
        )
