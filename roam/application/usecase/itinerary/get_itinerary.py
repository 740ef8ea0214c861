"""Get itinerary use case."""

from uuid import UUID

from pydantic import BaseModel

from roam.application.projection import ItineraryView, ResponseAggregator
from roam.application.usecase.base import BaseUseCase
from roam.domain.service import ItineraryService
from roam.domain.value import ItineraryId


class GetItineraryRequest(BaseModel):
    """Get itinerary request."""

    itinerary_id: str  # UUID string


class GetItineraryUseCase(BaseUseCase[GetItineraryRequest, ItineraryView]):
    """Use case for reading one itinerary."""

    def __init__(
        self,
        itinerary_service: ItineraryService,
        response_aggregator: ResponseAggregator,
    ) -> None:
        """Initialize get itinerary use case.

        Args:
            itinerary_service: Itinerary domain service
            response_aggregator: Builds the itinerary view
        """
        self.itinerary_service = itinerary_service
        self.response_aggregator = response_aggregator

    async def execute(self, request: GetItineraryRequest) -> ItineraryView:
        """Execute get itinerary flow.

        Raises:
            NotFoundError: If the itinerary doesn't exist
        """
        itinerary = await self.itinerary_service.get_by_id(
            ItineraryId(UUID(request.itinerary_id))
        )
        return await self.response_aggregator.project_itinerary(itinerary)
