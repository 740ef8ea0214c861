"""In-memory itinerary repository for testing."""

from roam.domain.model.itinerary import Itinerary
from roam.domain.repository.itinerary import ItineraryRepository
from roam.domain.value import ItineraryId, UserId

from .base import InMemoryEntityRepository


class InMemoryItineraryRepository(
    InMemoryEntityRepository[Itinerary, ItineraryId], ItineraryRepository
):
    """In-memory implementation of ItineraryRepository for testing."""

    async def find_all(self) -> list[Itinerary]:
        """Find all itineraries, newest first."""
        return sorted(
            self._entities.values(), key=lambda i: i.created_at, reverse=True
        )

    async def find_by_author(self, author_id: UserId) -> list[Itinerary]:
        """Find itineraries by a specific author."""
        itineraries = [i for i in self._entities.values() if i.author_id == author_id]
        itineraries.sort(key=lambda i: i.created_at, reverse=True)
        return itineraries

    async def add_collaborator(
        self, itinerary_id: ItineraryId, user_id: UserId
    ) -> bool:
        """Add a collaborator if not already present."""
        itinerary = self._entities.get(itinerary_id)
        if itinerary is None or user_id in itinerary.collaborators:
            return False

        # Build a new set rather than touching the stored one
        self._entities[itinerary_id] = itinerary.model_copy(
            update={"collaborators": itinerary.collaborators | {user_id}}
        )
        return True
