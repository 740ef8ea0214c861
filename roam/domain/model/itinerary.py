"""Itinerary aggregate root.

Itineraries are free-form travel plans. Each has a single author and a set
of collaborators who share the right to edit it.
"""

from datetime import datetime

from pydantic import Field

from roam.domain.model.common import DomainModel
from roam.domain.value import ItineraryId, UserId


class Itinerary(DomainModel):
    """Itinerary aggregate root.

    Business rules:
    - The author can always edit, whether or not they are in ``collaborators``
    - Collaborators can edit content and add further collaborators
    - Only the author can delete
    - Collaborators are never removed once added
    """

    id: ItineraryId
    author_id: UserId
    collaborators: frozenset[UserId] = frozenset()
    content: str = Field(min_length=1)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def is_author(self, user_id: UserId) -> bool:
        """Check whether the user wrote this itinerary."""
        return self.author_id == user_id

    def can_edit(self, user_id: UserId) -> bool:
        """Check whether the user may edit this itinerary.

        Both the author and every collaborator have edit rights.
        """
        return self.is_author(user_id) or user_id in self.collaborators
