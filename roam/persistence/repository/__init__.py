"""PostgreSQL repository implementations."""

from roam.persistence.repository.itinerary import PostgresItineraryRepository
from roam.persistence.repository.post import PostgresPostRepository
from roam.persistence.repository.user import PostgresUserRepository
from roam.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresItineraryRepository",
    "PostgresPostRepository",
    "PostgresVoteRepository",
]
