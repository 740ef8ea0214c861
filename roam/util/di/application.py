"""Application layer DI providers."""

from dishka import Scope, provide

from roam.application.projection import ResponseAggregator
from roam.application.usecase.favorite import (
    AddFavoriteUseCase,
    ListFavoritesUseCase,
    RemoveFavoriteUseCase,
)
from roam.application.usecase.itinerary import (
    CreateItineraryUseCase,
    DeleteItineraryUseCase,
    GetItineraryUseCase,
    ListItinerariesUseCase,
    UpdateItineraryUseCase,
)
from roam.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)
from roam.application.usecase.user import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUsernameUseCase,
)
from roam.application.usecase.vote import GetUpvoteCountUseCase, UpvoteUseCase
from roam.domain.service import (
    ItineraryService,
    PostService,
    UserService,
    VoteService,
)
from roam.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.APP

    @provide
    def get_response_aggregator(
        self, user_service: UserService, itinerary_service: ItineraryService
    ) -> ResponseAggregator:
        """Provide response aggregator."""
        return ResponseAggregator(
            user_service=user_service, itinerary_service=itinerary_service
        )

    # User use cases
    @provide
    def get_create_user_use_case(self, user_service: UserService) -> CreateUserUseCase:
        """Provide create user use case."""
        return CreateUserUseCase(user_service=user_service)

    @provide
    def get_get_user_use_case(self, user_service: UserService) -> GetUserUseCase:
        """Provide get user use case."""
        return GetUserUseCase(user_service=user_service)

    @provide
    def get_list_users_use_case(self, user_service: UserService) -> ListUsersUseCase:
        """Provide list users use case."""
        return ListUsersUseCase(user_service=user_service)

    @provide
    def get_update_username_use_case(
        self, user_service: UserService
    ) -> UpdateUsernameUseCase:
        """Provide update username use case."""
        return UpdateUsernameUseCase(user_service=user_service)

    @provide
    def get_delete_user_use_case(self, user_service: UserService) -> DeleteUserUseCase:
        """Provide delete user use case."""
        return DeleteUserUseCase(user_service=user_service)

    # Itinerary use cases
    @provide
    def get_create_itinerary_use_case(
        self,
        itinerary_service: ItineraryService,
        user_service: UserService,
        response_aggregator: ResponseAggregator,
    ) -> CreateItineraryUseCase:
        """Provide create itinerary use case."""
        return CreateItineraryUseCase(
            itinerary_service=itinerary_service,
            user_service=user_service,
            response_aggregator=response_aggregator,
        )

    @provide
    def get_get_itinerary_use_case(
        self,
        itinerary_service: ItineraryService,
        response_aggregator: ResponseAggregator,
    ) -> GetItineraryUseCase:
        """Provide get itinerary use case."""
        return GetItineraryUseCase(
            itinerary_service=itinerary_service,
            response_aggregator=response_aggregator,
        )

    @provide
    def get_list_itineraries_use_case(
        self,
        itinerary_service: ItineraryService,
        user_service: UserService,
        response_aggregator: ResponseAggregator,
    ) -> ListItinerariesUseCase:
        """Provide list itineraries use case."""
        return ListItinerariesUseCase(
            itinerary_service=itinerary_service,
            user_service=user_service,
            response_aggregator=response_aggregator,
        )

    @provide
    def get_update_itinerary_use_case(
        self,
        itinerary_service: ItineraryService,
        user_service: UserService,
        response_aggregator: ResponseAggregator,
    ) -> UpdateItineraryUseCase:
        """Provide update itinerary use case."""
        return UpdateItineraryUseCase(
            itinerary_service=itinerary_service,
            user_service=user_service,
            response_aggregator=response_aggregator,
        )

    @provide
    def get_delete_itinerary_use_case(
        self, itinerary_service: ItineraryService
    ) -> DeleteItineraryUseCase:
        """Provide delete itinerary use case."""
        return DeleteItineraryUseCase(itinerary_service=itinerary_service)

    # Post use cases
    @provide
    def get_create_post_use_case(
        self,
        post_service: PostService,
        user_service: UserService,
        response_aggregator: ResponseAggregator,
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(
            post_service=post_service,
            user_service=user_service,
            response_aggregator=response_aggregator,
        )

    @provide
    def get_get_post_use_case(
        self, post_service: PostService, response_aggregator: ResponseAggregator
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(
            post_service=post_service, response_aggregator=response_aggregator
        )

    @provide
    def get_list_posts_use_case(
        self,
        post_service: PostService,
        user_service: UserService,
        response_aggregator: ResponseAggregator,
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(
            post_service=post_service,
            user_service=user_service,
            response_aggregator=response_aggregator,
        )

    @provide
    def get_update_post_use_case(
        self, post_service: PostService, response_aggregator: ResponseAggregator
    ) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(
            post_service=post_service, response_aggregator=response_aggregator
        )

    @provide
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    # Favorite use cases
    @provide
    def get_add_favorite_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> AddFavoriteUseCase:
        """Provide add favorite use case."""
        return AddFavoriteUseCase(post_service=post_service, user_service=user_service)

    @provide
    def get_remove_favorite_use_case(
        self, post_service: PostService
    ) -> RemoveFavoriteUseCase:
        """Provide remove favorite use case."""
        return RemoveFavoriteUseCase(post_service=post_service)

    @provide
    def get_list_favorites_use_case(
        self, post_service: PostService, response_aggregator: ResponseAggregator
    ) -> ListFavoritesUseCase:
        """Provide list favorites use case."""
        return ListFavoritesUseCase(
            post_service=post_service, response_aggregator=response_aggregator
        )

    # Vote use cases
    @provide
    def get_upvote_use_case(
        self, vote_service: VoteService, user_service: UserService
    ) -> UpvoteUseCase:
        """Provide upvote use case."""
        return UpvoteUseCase(vote_service=vote_service, user_service=user_service)

    @provide
    def get_get_upvote_count_use_case(
        self, vote_service: VoteService, post_service: PostService
    ) -> GetUpvoteCountUseCase:
        """Provide get upvote count use case."""
        return GetUpvoteCountUseCase(
            vote_service=vote_service, post_service=post_service
        )
