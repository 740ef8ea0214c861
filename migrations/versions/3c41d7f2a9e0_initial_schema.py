"""initial_schema

Create the schema for Roam:
- Users (username only; credentials live with the identity provider)
- Itineraries and their collaborators
- Posts (publish an itinerary) and the users who favorited them
- Votes (one upvote per user per post)

Revision ID: 3c41d7f2a9e0
Revises:
Create Date: 2026-10-19 10:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c41d7f2a9e0"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamp(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def upgrade() -> None:
    """Upgrade schema."""
    # Enable required extensions
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("username", sa.String(64), nullable=False),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username", name="uq_users_username"),
    )

    # ========================================================================
    # ITINERARIES table
    # ========================================================================
    op.create_table(
        "itineraries",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("length(content) > 0", name="content_not_empty"),
    )
    op.create_index(
        "idx_itineraries_created_at",
        "itineraries",
        [sa.text("created_at DESC")],
    )
    op.create_index("idx_itineraries_author_id", "itineraries", ["author_id"])

    # ========================================================================
    # ITINERARY_COLLABORATORS table (composite key keeps the set duplicate-free)
    # ========================================================================
    op.create_table(
        "itinerary_collaborators",
        sa.Column("itinerary_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(
            ["itinerary_id"], ["itineraries.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint(
            "itinerary_id", "user_id", name="pk_itinerary_collaborator"
        ),
    )
    op.create_index(
        "idx_itinerary_collaborators_user_id",
        "itinerary_collaborators",
        ["user_id"],
    )

    # ========================================================================
    # POSTS table
    # ========================================================================
    op.create_table(
        "posts",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("tags", sa.Text(), nullable=False, server_default=""),
        sa.Column("rating", sa.Float(), nullable=False),
        # No foreign key: posts outlive a deleted itinerary
        sa.Column("itinerary_id", sa.UUID(), nullable=False),
        sa.Column("options", postgresql.JSONB(), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("rating >= 0 AND rating <= 5", name="rating_range"),
    )
    op.create_index("idx_posts_created_at", "posts", [sa.text("created_at DESC")])
    op.create_index("idx_posts_author_id", "posts", ["author_id"])
    op.create_index("idx_posts_itinerary_id", "posts", ["itinerary_id"])

    # ========================================================================
    # POST_FAVORITES table
    # ========================================================================
    op.create_table(
        "post_favorites",
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("post_id", "user_id", name="pk_post_favorite"),
    )
    op.create_index("idx_post_favorites_user_id", "post_favorites", ["user_id"])

    # ========================================================================
    # VOTES table
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("post_id", "user_id", name="unique_vote"),
    )
    op.create_index("idx_votes_user_id", "votes", ["user_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("votes")
    op.drop_table("post_favorites")
    op.drop_table("posts")
    op.drop_table("itinerary_collaborators")
    op.drop_table("itineraries")
    op.drop_table("users")
