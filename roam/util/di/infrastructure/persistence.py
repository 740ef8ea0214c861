"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from roam.config import Settings
from roam.domain.repository import (
    ItineraryRepository,
    PostRepository,
    UserRepository,
    VoteRepository,
)
from roam.persistence.database import create_engine, create_session_factory
from roam.persistence.repository import (
    PostgresItineraryRepository,
    PostgresPostRepository,
    PostgresUserRepository,
    PostgresVoteRepository,
)
from roam.util.di.base import ProviderBase
from roam.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL.

    Repositories are APP-scoped and open a short transaction per call
    from the shared session factory.
    """

    __is_mock__ = False

    scope = Scope.APP

    @provide
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()
        logfire.info("Database engine disposed")

    @provide
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide
    def get_user_repository(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session_factory)

    @provide
    def get_itinerary_repository(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> ItineraryRepository:
        """Provide Itinerary repository."""
        return PostgresItineraryRepository(session_factory)

    @provide
    def get_post_repository(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> PostRepository:
        """Provide Post repository."""
        return PostgresPostRepository(session_factory)

    @provide
    def get_vote_repository(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> VoteRepository:
        """Provide Vote repository."""
        return PostgresVoteRepository(session_factory)
