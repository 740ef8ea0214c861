"""User use cases."""

from .create_user import CreateUserRequest, CreateUserResponse, CreateUserUseCase
from .delete_user import DeleteUserRequest, DeleteUserResponse, DeleteUserUseCase
from .get_user import GetUserRequest, GetUserUseCase, UserItem
from .list_users import ListUsersRequest, ListUsersResponse, ListUsersUseCase
from .update_username import (
    UpdateUsernameRequest,
    UpdateUsernameResponse,
    UpdateUsernameUseCase,
)

__all__ = [
    "CreateUserRequest",
    "CreateUserResponse",
    "CreateUserUseCase",
    "DeleteUserRequest",
    "DeleteUserResponse",
    "DeleteUserUseCase",
    "GetUserRequest",
    "GetUserUseCase",
    "UserItem",
    "ListUsersRequest",
    "ListUsersResponse",
    "ListUsersUseCase",
    "UpdateUsernameRequest",
    "UpdateUsernameResponse",
    "UpdateUsernameUseCase",
]
