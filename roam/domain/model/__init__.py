"""Domain model entities for Roam."""

from roam.domain.model.itinerary import Itinerary
from roam.domain.model.post import Post
from roam.domain.model.user import User
from roam.domain.model.vote import Vote

__all__ = [
    "User",
    "Itinerary",
    "Post",
    "Vote",
]
