"""Mock persistence providers for testing."""

from dishka import Scope, provide

from roam.domain.repository import (
    ItineraryRepository,
    PostRepository,
    UserRepository,
    VoteRepository,
)
from roam.persistence.repository.inmemory import (
    InMemoryItineraryRepository,
    InMemoryPostRepository,
    InMemoryUserRepository,
    InMemoryVoteRepository,
)
from roam.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope to match the domain services that depend on it. Every
    test builds its own container, so each test still gets fresh
    repositories.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_itinerary_repository(self) -> ItineraryRepository:
        """Provide in-memory itinerary repository."""
        return InMemoryItineraryRepository()

    @provide(scope=Scope.APP)
    def get_post_repository(self) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository()

    @provide(scope=Scope.APP)
    def get_vote_repository(self) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository()
