"""Delete itinerary use case."""

from uuid import UUID

from pydantic import BaseModel

from roam.application.usecase.base import BaseUseCase
from roam.domain.service import ItineraryService
from roam.domain.value import ItineraryId, UserId


class DeleteItineraryRequest(BaseModel):
    """Delete itinerary request."""

    itinerary_id: str  # UUID string
    user_id: str  # Acting user (must be author)


class DeleteItineraryResponse(BaseModel):
    """Delete itinerary response."""

    msg: str


class DeleteItineraryUseCase(
    BaseUseCase[DeleteItineraryRequest, DeleteItineraryResponse]
):
    """Use case for deleting an itinerary.

    Posts referencing the itinerary are kept; their views show no itinerary.
    """

    def __init__(self, itinerary_service: ItineraryService) -> None:
        """Initialize delete itinerary use case.

        Args:
            itinerary_service: Itinerary domain service
        """
        self.itinerary_service = itinerary_service

    async def execute(self, request: DeleteItineraryRequest) -> DeleteItineraryResponse:
        """Execute delete itinerary flow.

        Raises:
            NotFoundError: If the itinerary doesn't exist
            NotAuthorizedError: If the user is not the author
        """
        itinerary_id = ItineraryId(UUID(request.itinerary_id))
        user_id = UserId(UUID(request.user_id))

        await self.itinerary_service.assert_author(itinerary_id, user_id)
        await self.itinerary_service.delete(itinerary_id)

        return DeleteItineraryResponse(msg="Deleted itinerary")
