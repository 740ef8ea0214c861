"""Vote use cases."""

from .get_upvote_count import (
    GetUpvoteCountRequest,
    GetUpvoteCountResponse,
    GetUpvoteCountUseCase,
)
from .upvote import UpvoteRequest, UpvoteResponse, UpvoteUseCase

__all__ = [
    "GetUpvoteCountRequest",
    "GetUpvoteCountResponse",
    "GetUpvoteCountUseCase",
    "UpvoteRequest",
    "UpvoteResponse",
    "UpvoteUseCase",
]
