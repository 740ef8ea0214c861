"""Favorite use cases."""

from .add_favorite import AddFavoriteRequest, AddFavoriteResponse, AddFavoriteUseCase
from .list_favorites import (
    ListFavoritesRequest,
    ListFavoritesResponse,
    ListFavoritesUseCase,
)
from .remove_favorite import (
    RemoveFavoriteRequest,
    RemoveFavoriteResponse,
    RemoveFavoriteUseCase,
)

__all__ = [
    "AddFavoriteRequest",
    "AddFavoriteResponse",
    "AddFavoriteUseCase",
    "ListFavoritesRequest",
    "ListFavoritesResponse",
    "ListFavoritesUseCase",
    "RemoveFavoriteRequest",
    "RemoveFavoriteResponse",
    "RemoveFavoriteUseCase",
]
