"""In-memory user repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from roam.domain.model.user import User
from roam.domain.repository.user import UserRepository
from roam.domain.value import UserId, Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users by ID."""
        return [self._users[u] for u in user_ids if u in self._users]

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username."""
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def find_all(self) -> list[User]:
        """Find all users ordered by username."""
        return sorted(self._users.values(), key=lambda u: u.username.root)

    async def save(self, user: User) -> User:
        """Save a user.

        Raises:
            IntegrityError: If the username is already taken
        """
        existing = await self.find_by_username(user.username)
        if existing and existing.id != user.id:
            raise IntegrityError("Duplicate username", None, Exception())

        self._users[user.id] = user
        return user

    async def update_username(
        self, user_id: UserId, username: Username
    ) -> Optional[User]:
        """Rename a user.

        Raises:
            IntegrityError: If another user already has that username
        """
        user = self._users.get(user_id)
        if user is None:
            return None

        existing = await self.find_by_username(username)
        if existing and existing.id != user_id:
            raise IntegrityError("Duplicate username", None, Exception())

        renamed = user.model_copy(update={"username": username})
        self._users[user_id] = renamed
        return renamed

    async def delete(self, user_id: UserId) -> bool:
        """Delete a user. Records owned by the user are left in place."""
        return self._users.pop(user_id, None) is not None
