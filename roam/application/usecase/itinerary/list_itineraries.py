"""List itineraries use case."""

import logfire
from pydantic import BaseModel

from roam.application.projection import ItineraryView, ResponseAggregator
from roam.application.usecase.base import BaseUseCase
from roam.domain.service import ItineraryService, UserService
from roam.domain.value import Username


class ListItinerariesRequest(BaseModel):
    """List itineraries request."""

    author: str | None = None  # Filter by author username


class ListItinerariesResponse(BaseModel):
    """List itineraries response."""

    itineraries: list[ItineraryView]


class ListItinerariesUseCase(
    BaseUseCase[ListItinerariesRequest, ListItinerariesResponse]
):
    """Use case for listing itineraries, newest first."""

    def __init__(
        self,
        itinerary_service: ItineraryService,
        user_service: UserService,
        response_aggregator: ResponseAggregator,
    ) -> None:
        """Initialize list itineraries use case.

        Args:
            itinerary_service: Itinerary domain service
            user_service: User domain service
            response_aggregator: Builds the itinerary views
        """
        self.itinerary_service = itinerary_service
        self.user_service = user_service
        self.response_aggregator = response_aggregator

    async def execute(self, request: ListItinerariesRequest) -> ListItinerariesResponse:
        """Execute list itineraries flow.

        Raises:
            NotFoundError: If the author filter names an unknown user
        """
        with logfire.span("list_itineraries.execute", author=request.author):
            if request.author:
                author = await self.user_service.get_by_username(
                    Username(request.author)
                )
                itineraries = await self.itinerary_service.get_by_author(author.id)
            else:
                itineraries = await self.itinerary_service.get_all_ordered_by_recency()

            return ListItinerariesResponse(
                itineraries=await self.response_aggregator.project_itineraries(
                    itineraries
                )
            )
