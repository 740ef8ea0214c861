"""User domain service.

Plays the identity collaborator for the rest of the domain: it maps
usernames to user IDs and back.
"""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from roam.domain.error import InvalidArgumentError, NotFoundError
from roam.domain.model import User
from roam.domain.repository import UserRepository
from roam.domain.value import UserId, Username

from .base import Service

# Shown in place of a username that no longer resolves
DELETED_USER = "DELETED_USER"


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def create(self, username: Username) -> User:
        """Register a new user.

        Args:
            username: Desired username

        Returns:
            Created user

        Raises:
            InvalidArgumentError: If the username is already taken
        """
        with logfire.span("user_service.create", username=username.root):
            if await self.user_repository.find_by_username(username):
                logfire.warn("Username taken", username=username.root)
                raise InvalidArgumentError(f"Username {username.root} is taken")

            user = User(id=UserId(uuid4()), username=username, created_at=datetime.now())
            try:
                saved = await self.user_repository.save(user)
            except IntegrityError:
                logfire.warn("Username taken concurrently", username=username.root)
                raise InvalidArgumentError(f"Username {username.root} is taken")

            logfire.info("User created", user_id=str(saved.id), username=username.root)
            return saved

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_username(self, username: Username) -> User:
        """Get user by username.

        Args:
            username: Username

        Returns:
            User entity

        Raises:
            NotFoundError: If no user has that username
        """
        with logfire.span("user_service.get_by_username", username=username.root):
            user = await self.user_repository.find_by_username(username)
            if not user:
                logfire.warn("User not found", username=username.root)
                raise NotFoundError("User", username.root)
            return user

    async def get_all(self) -> list[User]:
        """List every registered user."""
        return await self.user_repository.find_all()

    async def ids_to_usernames(self, user_ids: list[UserId]) -> list[str]:
        """Resolve user IDs to usernames in one batch.

        Args:
            user_ids: IDs to resolve

        Returns:
            Usernames in the same order, DELETED_USER for unknown IDs
        """
        if not user_ids:
            return []

        users = await self.user_repository.find_by_ids(user_ids)
        by_id = {user.id: user.username.root for user in users}
        return [by_id.get(user_id, DELETED_USER) for user_id in user_ids]

    async def update_username(self, user_id: UserId, username: Username) -> User:
        """Rename a user.

        Keeping the current username is allowed and leaves the user as is.

        Args:
            user_id: User ID
            username: New username

        Returns:
            Renamed user

        Raises:
            NotFoundError: If user not found
            InvalidArgumentError: If another user has that username
        """
        with logfire.span(
            "user_service.update_username",
            user_id=str(user_id),
            username=username.root,
        ):
            holder = await self.user_repository.find_by_username(username)
            if holder and holder.id != user_id:
                logfire.warn("Username taken", username=username.root)
                raise InvalidArgumentError(f"Username {username.root} is taken")

            try:
                renamed = await self.user_repository.update_username(
                    user_id, username
                )
            except IntegrityError:
                logfire.warn("Username taken concurrently", username=username.root)
                raise InvalidArgumentError(f"Username {username.root} is taken")

            if renamed is None:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))

            logfire.info(
                "Username updated", user_id=str(user_id), username=username.root
            )
            return renamed

    async def delete(self, user_id: UserId) -> None:
        """Delete a user. Safe to repeat.

        Collaborator entries for the user remain and resolve to DELETED_USER.
        """
        with logfire.span("user_service.delete", user_id=str(user_id)):
            deleted = await self.user_repository.delete(user_id)
            logfire.info(
                "User deleted" if deleted else "User already absent",
                user_id=str(user_id),
            )
