"""Itinerary use cases."""

from .create_itinerary import (
    CreateItineraryRequest,
    CreateItineraryResponse,
    CreateItineraryUseCase,
)
from .delete_itinerary import (
    DeleteItineraryRequest,
    DeleteItineraryResponse,
    DeleteItineraryUseCase,
)
from .get_itinerary import GetItineraryRequest, GetItineraryUseCase
from .list_itineraries import (
    ListItinerariesRequest,
    ListItinerariesResponse,
    ListItinerariesUseCase,
)
from .update_itinerary import (
    UpdateItineraryRequest,
    UpdateItineraryResponse,
    UpdateItineraryUseCase,
)

__all__ = [
    "CreateItineraryRequest",
    "CreateItineraryResponse",
    "CreateItineraryUseCase",
    "DeleteItineraryRequest",
    "DeleteItineraryResponse",
    "DeleteItineraryUseCase",
    "GetItineraryRequest",
    "GetItineraryUseCase",
    "ListItinerariesRequest",
    "ListItinerariesResponse",
    "ListItinerariesUseCase",
    "UpdateItineraryRequest",
    "UpdateItineraryResponse",
    "UpdateItineraryUseCase",
]
