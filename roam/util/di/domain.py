"""Domain layer DI providers."""

from dishka import Scope, provide

from roam.domain.repository import (
    ItineraryRepository,
    PostRepository,
    UserRepository,
    VoteRepository,
)
from roam.domain.service import (
    ItineraryService,
    PostService,
    UserService,
    VoteService,
)
from roam.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are APP-scoped: each is built once per container and
    shared by reference. They hold no per-request state.
    """

    scope = Scope.APP

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_itinerary_service(
        self, itinerary_repository: ItineraryRepository
    ) -> ItineraryService:
        """Provide itinerary domain service."""
        return ItineraryService(itinerary_repository=itinerary_repository)

    @provide
    def get_post_service(
        self, post_repository: PostRepository, itinerary_service: ItineraryService
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository, itinerary_service=itinerary_service
        )

    @provide
    def get_vote_service(
        self, vote_repository: VoteRepository, post_service: PostService
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(vote_repository=vote_repository, post_service=post_service)
