"""Repository interfaces for Roam domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from roam.domain.repository.base import EntityRepository
from roam.domain.repository.itinerary import ItineraryRepository
from roam.domain.repository.post import PostRepository
from roam.domain.repository.user import UserRepository
from roam.domain.repository.vote import VoteRepository

__all__ = [
    "EntityRepository",
    "UserRepository",
    "ItineraryRepository",
    "PostRepository",
    "VoteRepository",
]
