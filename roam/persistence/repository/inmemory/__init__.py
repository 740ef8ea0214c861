"""In-memory repository implementations for testing."""

from .base import InMemoryEntityRepository
from .itinerary import InMemoryItineraryRepository
from .post import InMemoryPostRepository
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryEntityRepository",
    "InMemoryItineraryRepository",
    "InMemoryPostRepository",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
