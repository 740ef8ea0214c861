"""SQLAlchemy table definitions for Roam.

These table definitions are used for Core queries and mapped to domain
models by hand. They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Float,
    ForeignKey,
    Index,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(64), nullable=False, unique=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# ITINERARIES TABLE
# ============================================================================
itineraries_table = Table(
    "itineraries",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("length(content) > 0", name="content_not_empty"),
)

Index("idx_itineraries_created_at", itineraries_table.c.created_at.desc())
Index("idx_itineraries_author_id", itineraries_table.c.author_id)

# ============================================================================
# ITINERARY_COLLABORATORS TABLE (junction table, one row per collaborator)
# ============================================================================
itinerary_collaborators_table = Table(
    "itinerary_collaborators",
    metadata,
    Column(
        "itinerary_id",
        UUID,
        ForeignKey("itineraries.id", ondelete="CASCADE"),
        nullable=False,
    ),
    # No foreign key: a deleted user stays listed and renders as DELETED_USER
    Column("user_id", UUID, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("itinerary_id", "user_id", name="pk_itinerary_collaborator"),
)

Index("idx_itinerary_collaborators_user_id", itinerary_collaborators_table.c.user_id)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("title", String(300), nullable=False),
    Column("tags", Text, nullable=False, server_default=""),
    Column("rating", Float, nullable=False),
    # No foreign key: deleting an itinerary leaves its posts in place
    Column("itinerary_id", UUID, nullable=False),
    Column("options", JSONB, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("rating >= 0 AND rating <= 5", name="rating_range"),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_author_id", posts_table.c.author_id)
Index("idx_posts_itinerary_id", posts_table.c.itinerary_id)

# ============================================================================
# POST_FAVORITES TABLE (junction table, one row per favoriting user)
# ============================================================================
post_favorites_table = Table(
    "post_favorites",
    metadata,
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("post_id", "user_id", name="pk_post_favorite"),
)

Index("idx_post_favorites_user_id", post_favorites_table.c.user_id)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("post_id", "user_id", name="unique_vote"),
)

Index("idx_votes_user_id", votes_table.c.user_id)
