"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

import logfire
import pytest

from roam.domain.model import Itinerary, Post, User
from roam.domain.value import ItineraryId, PostId, UserId, Username


@pytest.fixture(scope="session", autouse=True)
def quiet_logfire():
    """Keep spans and logs local and silent during tests."""
    logfire.configure(send_to_logfire=False, console=False)


def make_user(username: str) -> User:
    """Build a user with a fresh ID."""
    return User(id=UserId(uuid4()), username=Username(username))


def make_itinerary(
    author_id: UserId,
    content: str = "Day 1: Colosseum. Day 2: Vatican.",
    collaborators: frozenset[UserId] = frozenset(),
    age: timedelta = timedelta(0),
) -> Itinerary:
    """Build an itinerary; ``age`` pushes its timestamps into the past."""
    created = datetime.now() - age
    return Itinerary(
        id=ItineraryId(uuid4()),
        author_id=author_id,
        collaborators=collaborators,
        content=content,
        created_at=created,
        updated_at=created,
    )


def make_post(
    author_id: UserId,
    itinerary_id: ItineraryId,
    title: str = "My Rome Trip",
    rating: float = 4.5,
    age: timedelta = timedelta(0),
) -> Post:
    """Build a post; ``age`` pushes its timestamps into the past."""
    created = datetime.now() - age
    return Post(
        id=PostId(uuid4()),
        author_id=author_id,
        title=title,
        tags="rome,food",
        rating=rating,
        itinerary_id=itinerary_id,
        created_at=created,
        updated_at=created,
    )
