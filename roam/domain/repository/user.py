"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from roam.domain.model.user import User
from roam.domain.value import UserId, Username


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find several users by ID (batch query).

        Args:
            user_ids: IDs to look up

        Returns:
            The users that exist (unknown IDs are skipped)
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username.

        Args:
            username: The user's username

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[User]:
        """Find all users, ordered by username.

        Returns:
            List of users
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create).

        Args:
            user: The user to save

        Returns:
            The saved user

        Raises:
            IntegrityError: If the username is already taken
        """
        pass

    @abstractmethod
    async def update_username(
        self, user_id: UserId, username: Username
    ) -> Optional[User]:
        """Rename a user.

        Args:
            user_id: The user's unique identifier
            username: The new username

        Returns:
            The renamed user, or None if the user doesn't exist

        Raises:
            IntegrityError: If another user already has that username
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId) -> bool:
        """Delete a user.

        Args:
            user_id: The user's unique identifier

        Returns:
            True if a user was deleted, False if none existed
        """
        pass
