"""PostgreSQL implementation of Vote repository."""

from typing import Optional

from sqlalchemy import and_, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from roam.domain.model import Vote
from roam.domain.repository import VoteRepository
from roam.domain.value import PostId, UserId
from roam.persistence.mappers import row_to_vote, vote_to_dict
from roam.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize repository with a session factory.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self.session_factory = session_factory

    async def find_by_post_and_user(
        self, post_id: PostId, user_id: UserId
    ) -> Optional[Vote]:
        """Find a user's vote on a post."""
        async with self.session_factory.begin() as session:
            stmt = select(votes_table).where(
                and_(
                    votes_table.c.post_id == post_id,
                    votes_table.c.user_id == user_id,
                )
            )
            result = await session.execute(stmt)
            row = result.fetchone()
            return row_to_vote(row._asdict()) if row else None

    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create).

        The unique (post_id, user_id) constraint raises IntegrityError for
        a second vote.
        """
        async with self.session_factory.begin() as session:
            stmt = insert(votes_table).values(**vote_to_dict(vote))
            await session.execute(stmt)
        return vote

    async def count_by_post(self, post_id: PostId) -> int:
        """Count votes on a post."""
        async with self.session_factory.begin() as session:
            stmt = (
                select(func.count())
                .select_from(votes_table)
                .where(votes_table.c.post_id == post_id)
            )
            result = await session.execute(stmt)
            return result.scalar() or 0
