"""Post aggregate root.

Posts publish an itinerary to the community, along with tags, a rating and
presentation options. Other users can favorite and upvote them.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from roam.domain.model.common import DomainModel
from roam.domain.value import ItineraryId, PostId, PostOptions, UserId


class Post(DomainModel):
    """Post aggregate root.

    Business rules:
    - ``itinerary_id`` must point at an existing itinerary whenever it is set
    - Only the author may edit or delete the post
    - ``author_id`` never changes after creation
    - ``favorite_users`` holds each user at most once
    """

    id: PostId
    author_id: UserId
    title: str = Field(min_length=1, max_length=300)
    tags: str = ""
    rating: float = Field(ge=0, le=5)
    itinerary_id: ItineraryId
    options: Optional[PostOptions] = None
    favorite_users: frozenset[UserId] = frozenset()
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def is_author(self, user_id: UserId) -> bool:
        """Check whether the user wrote this post."""
        return self.author_id == user_id

    def can_edit(self, user_id: UserId) -> bool:
        """Check whether the user may edit this post.

        Posts have no collaborators, so only the author qualifies.
        """
        return self.is_author(user_id)
