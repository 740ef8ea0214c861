"""keep collaborators of deleted users

Drop the foreign key from itinerary_collaborators.user_id to users.id so
that deleting a user leaves their collaborator entries in place. Itinerary
views render those entries as DELETED_USER.

Revision ID: 9b2e5d84c17f
Revises: 3c41d7f2a9e0
Create Date: 2026-10-19 15:40:07.201934

"""

from typing import Sequence, Union

from alembic import op


# revision identifiers, used by Alembic.
revision: str = "9b2e5d84c17f"
down_revision: Union[str, Sequence[str], None] = "3c41d7f2a9e0"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Postgres default name for the unnamed constraint in the initial schema
    op.drop_constraint(
        "itinerary_collaborators_user_id_fkey",
        "itinerary_collaborators",
        type_="foreignkey",
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Rows pointing at deleted users would block the constraint
    op.execute(
        """
        DELETE FROM itinerary_collaborators
        WHERE user_id NOT IN (SELECT id FROM users)
        """
    )
    op.create_foreign_key(
        "itinerary_collaborators_user_id_fkey",
        "itinerary_collaborators",
        "users",
        ["user_id"],
        ["id"],
        ondelete="CASCADE",
    )
