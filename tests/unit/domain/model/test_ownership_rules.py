"""Unit tests for the edit rules on Itinerary and Post."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from roam.domain.value import ItineraryId, UserId
from tests.conftest import make_itinerary, make_post


class TestItineraryCanEdit:
    """Tests for Itinerary.can_edit and is_author."""

    def test_author_can_edit_without_being_collaborator(self):
        author = UserId(uuid4())
        itinerary = make_itinerary(author)

        assert itinerary.can_edit(author)
        assert itinerary.is_author(author)

    def test_collaborator_can_edit_but_is_not_author(self):
        author = UserId(uuid4())
        collaborator = UserId(uuid4())
        itinerary = make_itinerary(author, collaborators=frozenset({collaborator}))

        assert itinerary.can_edit(collaborator)
        assert not itinerary.is_author(collaborator)

    def test_stranger_cannot_edit(self):
        itinerary = make_itinerary(
            UserId(uuid4()), collaborators=frozenset({UserId(uuid4())})
        )

        assert not itinerary.can_edit(UserId(uuid4()))

    def test_empty_content_rejected(self):
        with pytest.raises(ValidationError):
            make_itinerary(UserId(uuid4()), content="")

    def test_itinerary_is_frozen(self):
        itinerary = make_itinerary(UserId(uuid4()))

        with pytest.raises(ValidationError):
            itinerary.content = "changed"


class TestPostCanEdit:
    """Tests for Post.can_edit."""

    def test_only_author_can_edit(self):
        author = UserId(uuid4())
        post = make_post(author, ItineraryId(uuid4()))

        assert post.can_edit(author)
        assert not post.can_edit(UserId(uuid4()))

    def test_favoriting_does_not_grant_edit(self):
        fan = UserId(uuid4())
        post = make_post(UserId(uuid4()), ItineraryId(uuid4())).model_copy(
            update={"favorite_users": frozenset({fan})}
        )

        assert not post.can_edit(fan)

    @pytest.mark.parametrize("rating", [-0.5, 5.5])
    def test_rating_out_of_range_rejected(self, rating):
        with pytest.raises(ValidationError):
            make_post(UserId(uuid4()), ItineraryId(uuid4()), rating=rating)
