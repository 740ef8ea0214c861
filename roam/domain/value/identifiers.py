"""Strongly typed identifiers for Roam domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Core domain entity identifiers
UserId = NewType("UserId", UUID)
ItineraryId = NewType("ItineraryId", UUID)
PostId = NewType("PostId", UUID)
VoteId = NewType("VoteId", UUID)
