"""User aggregate root.

Users are only known by id and username here; credentials and sessions
belong to the identity provider in front of this service.
"""

from datetime import datetime

from pydantic import Field

from roam.domain.model.common import DomainModel
from roam.domain.value import UserId, Username


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    username: Username
    created_at: datetime = Field(default_factory=datetime.now)
