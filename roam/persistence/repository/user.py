"""PostgreSQL implementation of User repository."""

from typing import List, Optional, Sequence

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from roam.domain.model import User
from roam.domain.repository import UserRepository
from roam.domain.value import UserId, Username
from roam.persistence.mappers import row_to_user, user_to_dict
from roam.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize repository with a session factory.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self.session_factory = session_factory

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        async with self.session_factory.begin() as session:
            stmt = select(users_table).where(users_table.c.id == user_id)
            result = await session.execute(stmt)
            row = result.mappings().first()
            return row_to_user(row) if row else None

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find several users by ID (batch query)."""
        if not user_ids:
            return []

        async with self.session_factory.begin() as session:
            stmt = select(users_table).where(users_table.c.id.in_(user_ids))
            result = await session.execute(stmt)
            return [row_to_user(row) for row in result.mappings().all()]

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username.

        Args:
            username: Username to search for

        Returns:
            User if found, None otherwise
        """
        async with self.session_factory.begin() as session:
            stmt = select(users_table).where(users_table.c.username == username.root)
            result = await session.execute(stmt)
            row = result.mappings().first()
            return row_to_user(row) if row else None

    async def find_all(self) -> List[User]:
        """Find all users ordered by username."""
        async with self.session_factory.begin() as session:
            stmt = select(users_table).order_by(users_table.c.username)
            result = await session.execute(stmt)
            return [row_to_user(row) for row in result.mappings().all()]

    async def save(self, user: User) -> User:
        """Insert a user.

        The unique username constraint raises IntegrityError for a taken
        username.
        """
        async with self.session_factory.begin() as session:
            await session.execute(users_table.insert().values(**user_to_dict(user)))
        return user

    async def update_username(
        self, user_id: UserId, username: Username
    ) -> Optional[User]:
        """Rename a user in one statement.

        The unique username constraint raises IntegrityError when another
        user holds the name.
        """
        async with self.session_factory.begin() as session:
            stmt = (
                update(users_table)
                .where(users_table.c.id == user_id)
                .values(username=username.root)
                .returning(users_table)
            )
            result = await session.execute(stmt)
            row = result.mappings().first()
            return row_to_user(row) if row else None

    async def delete(self, user_id: UserId) -> bool:
        """Delete a user.

        Their itineraries, posts, favorites and votes cascade. Collaborator
        rows have no foreign key to users and stay behind.
        """
        async with self.session_factory.begin() as session:
            stmt = delete(users_table).where(users_table.c.id == user_id)
            result = await session.execute(stmt)
            return result.rowcount > 0  # type: ignore[attr-defined]
