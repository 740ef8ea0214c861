"""Domain value objects for Roam."""

from roam.domain.value.identifiers import (
    ItineraryId,
    PostId,
    UserId,
    VoteId,
)
from roam.domain.value.types import (
    PostOptions,
    Username,
)

__all__ = [
    # Identifiers
    "UserId",
    "ItineraryId",
    "PostId",
    "VoteId",
    # Types
    "Username",
    "PostOptions",
]
