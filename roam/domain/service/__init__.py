"""Domain services."""

from .base import Service
from .itinerary_service import ItineraryService
from .post_service import PostService
from .user_service import DELETED_USER, UserService
from .vote_service import VoteService

__all__ = [
    "DELETED_USER",
    "ItineraryService",
    "PostService",
    "Service",
    "UserService",
    "VoteService",
]
