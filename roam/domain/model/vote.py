"""Vote entity.

Votes are upvotes on posts. Each user can cast one vote per post.
"""

from datetime import datetime

from pydantic import Field

from roam.domain.model.common import DomainModel
from roam.domain.value import PostId, UserId, VoteId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per user per post (enforced by a unique constraint)
    - Votes are never edited
    """

    id: VoteId
    post_id: PostId
    user_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)
