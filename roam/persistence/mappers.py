"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping. Set-valued fields
(collaborators, favorite users) live in junction tables and are passed in
separately.
"""

from typing import Any, Dict, Iterable, Mapping
from uuid import UUID

from roam.domain.model import Itinerary, Post, User, Vote
from roam.domain.value import (
    ItineraryId,
    PostId,
    PostOptions,
    UserId,
    Username,
    VoteId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Mapping[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return {
        "id": user.id,
        "username": user.username.root,
        "created_at": user.created_at,
    }


def row_to_itinerary(
    row: Mapping[str, Any], collaborators: Iterable[UUID] = ()
) -> Itinerary:
    """Convert database row to Itinerary domain model.

    Args:
        row: Database row as dict
        collaborators: User IDs from itinerary_collaborators

    Returns:
        Itinerary domain model
    """
    return Itinerary(
        id=ItineraryId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["author_id"])),
        collaborators=frozenset(UserId(_uuid(c)) for c in collaborators),
        content=row["content"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def itinerary_to_dict(itinerary: Itinerary) -> Dict[str, Any]:
    """Convert Itinerary domain model to a dict for the itineraries table.

    Collaborators are excluded; they are stored in their own table.
    """
    return itinerary.model_dump(exclude={"collaborators"})


def row_to_post(row: Mapping[str, Any], favorite_users: Iterable[UUID] = ()) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict
        favorite_users: User IDs from post_favorites

    Returns:
        Post domain model
    """
    options = row.get("options")
    return Post(
        id=PostId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["author_id"])),
        title=row["title"],
        tags=row["tags"],
        rating=row["rating"],
        itinerary_id=ItineraryId(_uuid(row["itinerary_id"])),
        options=PostOptions.model_validate(options) if options is not None else None,
        favorite_users=frozenset(UserId(_uuid(u)) for u in favorite_users),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_values(values: Mapping[str, Any]) -> Dict[str, Any]:
    """Convert post field values to column values.

    ``options`` is stored as JSONB, so value objects become plain dicts.
    """
    result = dict(values)
    options = result.get("options")
    if isinstance(options, PostOptions):
        result["options"] = options.model_dump()
    return result


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to a dict for the posts table.

    Favorite users are excluded; they are stored in their own table.
    """
    return post_values(
        {**post.model_dump(exclude={"favorite_users", "options"}), "options": post.options}
    )


def row_to_vote(row: Mapping[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    return vote.model_dump()
