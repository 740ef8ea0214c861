"""Domain value objects for Roam.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re

from pydantic import field_validator

from roam.domain.value.common import RootValueObject, ValueObject


class Username(RootValueObject[str]):
    """Public username a user is known by.

    1-64 characters, no whitespace. Examples: 'alice', 'bob.travels'
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username length and characters."""
        if len(v) < 1 or len(v) > 64:
            raise ValueError("Username must be 1-64 characters")
        if re.search(r"\s", v):
            raise ValueError("Username must not contain whitespace")
        return v


class PostOptions(ValueObject):
    """Presentation options attached to a post."""

    background_color: str | None = None
