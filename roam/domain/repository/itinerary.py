"""Itinerary repository interface."""

from abc import abstractmethod
from typing import List

from roam.domain.model.itinerary import Itinerary
from roam.domain.repository.base import EntityRepository
from roam.domain.value import ItineraryId, UserId


class ItineraryRepository(EntityRepository[Itinerary, ItineraryId]):
    """Repository for Itinerary aggregate.

    Defines the contract for itinerary persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_all(self) -> List[Itinerary]:
        """Find all itineraries, most recently created first.

        Returns:
            List of itineraries sorted by created_at descending
        """
        pass

    @abstractmethod
    async def find_by_author(self, author_id: UserId) -> List[Itinerary]:
        """Find itineraries written by a user.

        Args:
            author_id: The author's user ID

        Returns:
            List of the author's itineraries, most recent first
        """
        pass

    @abstractmethod
    async def add_collaborator(
        self, itinerary_id: ItineraryId, user_id: UserId
    ) -> bool:
        """Atomically add a user to an itinerary's collaborators.

        The membership check and the insert happen as one operation, so
        concurrent calls can never store the same collaborator twice.

        Args:
            itinerary_id: The itinerary ID
            user_id: The user to add

        Returns:
            True if the user was added, False if already a collaborator
            or the itinerary doesn't exist
        """
        pass
