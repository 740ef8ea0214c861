"""Read-side views joining posts and itineraries with their references.

The aggregator resolves user IDs to usernames and itinerary IDs to full
itinerary views. It never writes and keeps no state of its own.
"""

from datetime import datetime
from typing import Sequence

import logfire
from pydantic import BaseModel

from roam.domain.model import Itinerary, Post
from roam.domain.service import ItineraryService, UserService
from roam.domain.value import PostOptions, UserId


class ItineraryView(BaseModel):
    """Itinerary with usernames in place of user IDs."""

    itinerary_id: str
    author: str
    collaborators: list[str]
    content: str
    created_at: datetime
    updated_at: datetime


class PostSummary(BaseModel):
    """Post with its author resolved, without the itinerary join."""

    post_id: str
    author: str
    title: str
    tags: str
    rating: float
    itinerary_id: str
    options: PostOptions | None
    favorite_count: int
    created_at: datetime
    updated_at: datetime


class PostView(PostSummary):
    """Post with its author and itinerary resolved.

    ``itinerary`` is None when the referenced itinerary has been deleted.
    """

    itinerary: ItineraryView | None


class ResponseAggregator:
    """Builds views for posts and itineraries."""

    def __init__(
        self, user_service: UserService, itinerary_service: ItineraryService
    ) -> None:
        """Initialize response aggregator.

        Args:
            user_service: User domain service, resolves usernames
            itinerary_service: Itinerary domain service, resolves references
        """
        self.user_service = user_service
        self.itinerary_service = itinerary_service

    async def _username(self, user_id: UserId) -> str:
        # Raises NotFoundError for a missing author
        user = await self.user_service.get_by_id(user_id)
        return user.username.root

    async def project_itinerary(self, itinerary: Itinerary) -> ItineraryView:
        """Resolve an itinerary's author and collaborators.

        Raises:
            NotFoundError: If the author no longer exists
        """
        author = await self._username(itinerary.author_id)
        # Sort for a stable order; the collaborator set itself has none
        collaborator_ids = sorted(itinerary.collaborators, key=str)
        collaborators = await self.user_service.ids_to_usernames(collaborator_ids)

        return ItineraryView(
            itinerary_id=str(itinerary.id),
            author=author,
            collaborators=collaborators,
            content=itinerary.content,
            created_at=itinerary.created_at,
            updated_at=itinerary.updated_at,
        )

    async def project_itineraries(
        self, itineraries: Sequence[Itinerary]
    ) -> list[ItineraryView]:
        """Project each itinerary, keeping the input order."""
        return [await self.project_itinerary(i) for i in itineraries]

    async def summarize_post(self, post: Post) -> PostSummary:
        """Resolve a post's author only.

        Raises:
            NotFoundError: If the author no longer exists
        """
        return PostSummary(
            post_id=str(post.id),
            author=await self._username(post.author_id),
            title=post.title,
            tags=post.tags,
            rating=post.rating,
            itinerary_id=str(post.itinerary_id),
            options=post.options,
            favorite_count=len(post.favorite_users),
            created_at=post.created_at,
            updated_at=post.updated_at,
        )

    async def project_post(self, post: Post) -> PostView:
        """Resolve a post's author and itinerary.

        A post whose itinerary was deleted gets ``itinerary=None``.

        Raises:
            NotFoundError: If the author no longer exists
        """
        with logfire.span("response_aggregator.project_post", post_id=str(post.id)):
            summary = await self.summarize_post(post)

            itinerary = await self.itinerary_service.find_by_id(post.itinerary_id)
            if itinerary is None:
                logfire.warn(
                    "Post references a missing itinerary",
                    post_id=str(post.id),
                    itinerary_id=str(post.itinerary_id),
                )
                itinerary_view = None
            else:
                itinerary_view = await self.project_itinerary(itinerary)

            return PostView(**summary.model_dump(), itinerary=itinerary_view)

    async def project_posts(self, posts: Sequence[Post]) -> list[PostView]:
        """Project each post, keeping the input order.

        The first failure propagates and no partial list is returned.
        """
        with logfire.span("response_aggregator.project_posts", count=len(posts)):
            return [await self.project_post(post) for post in posts]
