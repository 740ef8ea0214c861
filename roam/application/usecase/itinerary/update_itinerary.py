"""Update itinerary use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from roam.application.projection import ItineraryView, ResponseAggregator
from roam.application.usecase.base import BaseUseCase
from roam.domain.error import InvalidArgumentError
from roam.domain.service import ItineraryService, UserService
from roam.domain.value import ItineraryId, UserId, Username


class UpdateItineraryRequest(BaseModel):
    """Update itinerary request."""

    itinerary_id: str  # UUID string
    user_id: str  # Acting user (author or collaborator)
    content: str | None = None  # New content
    collaborator: str | None = None  # Username to add as collaborator


class UpdateItineraryResponse(BaseModel):
    """Update itinerary response."""

    msg: str
    itinerary: ItineraryView


class UpdateItineraryUseCase(
    BaseUseCase[UpdateItineraryRequest, UpdateItineraryResponse]
):
    """Use case for editing an itinerary's content or collaborators."""

    def __init__(
        self,
        itinerary_service: ItineraryService,
        user_service: UserService,
        response_aggregator: ResponseAggregator,
    ) -> None:
        """Initialize update itinerary use case.

        Args:
            itinerary_service: Itinerary domain service
            user_service: User domain service
            response_aggregator: Builds the itinerary view
        """
        self.itinerary_service = itinerary_service
        self.user_service = user_service
        self.response_aggregator = response_aggregator

    async def execute(self, request: UpdateItineraryRequest) -> UpdateItineraryResponse:
        """Execute update itinerary flow.

        Steps:
        1. Reject a request with nothing to change
        2. Check the acting user is the author or a collaborator
        3. Resolve the collaborator username, if any
        4. Apply the update via ItineraryService

        Raises:
            InvalidArgumentError: If neither content nor collaborator is given
            NotFoundError: If the itinerary or collaborator doesn't exist
            NotAuthorizedError: If the user may not edit the itinerary
        """
        itinerary_id = ItineraryId(UUID(request.itinerary_id))
        user_id = UserId(UUID(request.user_id))

        with logfire.span(
            "update_itinerary.execute",
            itinerary_id=request.itinerary_id,
            user_id=request.user_id,
        ):
            if request.content is None and request.collaborator is None:
                raise InvalidArgumentError(
                    f"Nothing to update on itinerary {request.itinerary_id}"
                )

            await self.itinerary_service.assert_editable(itinerary_id, user_id)

            collaborator_id = None
            if request.collaborator is not None:
                collaborator = await self.user_service.get_by_username(
                    Username(request.collaborator)
                )
                collaborator_id = collaborator.id

            itinerary = await self.itinerary_service.update(
                itinerary_id,
                new_content=request.content,
                new_collaborator=collaborator_id,
            )

            return UpdateItineraryResponse(
                msg="Itinerary successfully updated!",
                itinerary=await self.response_aggregator.project_itinerary(itinerary),
            )
