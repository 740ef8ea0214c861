"""Create itinerary use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from roam.application.projection import ItineraryView, ResponseAggregator
from roam.application.usecase.base import BaseUseCase
from roam.domain.service import ItineraryService, UserService
from roam.domain.value import UserId


class CreateItineraryRequest(BaseModel):
    """Create itinerary request."""

    user_id: str  # Acting user, becomes the author
    content: str


class CreateItineraryResponse(BaseModel):
    """Create itinerary response."""

    msg: str
    itinerary: ItineraryView


class CreateItineraryUseCase(
    BaseUseCase[CreateItineraryRequest, CreateItineraryResponse]
):
    """Use case for creating an itinerary."""

    def __init__(
        self,
        itinerary_service: ItineraryService,
        user_service: UserService,
        response_aggregator: ResponseAggregator,
    ) -> None:
        """Initialize create itinerary use case.

        Args:
            itinerary_service: Itinerary domain service
            user_service: User domain service
            response_aggregator: Builds the itinerary view
        """
        self.itinerary_service = itinerary_service
        self.user_service = user_service
        self.response_aggregator = response_aggregator

    async def execute(self, request: CreateItineraryRequest) -> CreateItineraryResponse:
        """Execute create itinerary flow.

        Raises:
            NotFoundError: If the acting user doesn't exist
            ValidationError: If content is empty
        """
        author_id = UserId(UUID(request.user_id))
        await self.user_service.get_by_id(author_id)  # Raises NotFoundError

        with logfire.span("create_itinerary.execute", author_id=request.user_id):
            itinerary = await self.itinerary_service.create(author_id, request.content)

            return CreateItineraryResponse(
                msg="Itinerary successfully created!",
                itinerary=await self.response_aggregator.project_itinerary(itinerary),
            )
