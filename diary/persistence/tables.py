"""SQLAlchemy table definitions for the diary service.

Core tables only; rows are mapped to frozen domain models by hand in
``mappers``. They match the schema created by the Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

from diary.domain.value import Emoji, ReactionTargetType

# Metadata object for all tables
metadata = MetaData()

EMOJI_VALUES = ", ".join(f"'{e.value}'" for e in Emoji)
TARGET_TYPE_VALUES = ", ".join(f"'{t.value}'" for t in ReactionTargetType)

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("username", String(30), nullable=False, unique=True),
    Column("email", String(255), nullable=False, unique=True),  # Lower-cased
    Column("password_hash", Text, nullable=False),
    Column("display_name", String(100), nullable=True),
    Column("avatar_url", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# DIARIES TABLE
# ============================================================================
diaries_table = Table(
    "diaries",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("title", String(200), nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("is_public", Boolean, nullable=False, server_default="false"),
    Column("tags", ARRAY(Text), nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("length(title) > 0", name="check_title_not_empty"),
)

Index("idx_diaries_author_created", diaries_table.c.author_id, diaries_table.c.created_at)
Index("idx_diaries_public_created", diaries_table.c.is_public, diaries_table.c.created_at)

# ============================================================================
# COMMENTS TABLE (two levels: parent_id NULL for top-level)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "diary_id",
        UUID(as_uuid=True),
        ForeignKey("diaries.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("content", String(1000), nullable=False),
    Column(
        "parent_id",
        UUID(as_uuid=True),
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("length(content) > 0", name="check_content_not_empty"),
)

Index("idx_comments_diary_created", comments_table.c.diary_id, comments_table.c.created_at)
Index("idx_comments_parent", comments_table.c.parent_id)

# ============================================================================
# REACTIONS TABLE (one row per user per target)
# ============================================================================
reactions_table = Table(
    "reactions",
    metadata,
    Column("target_type", String(20), nullable=False),
    Column("target_id", UUID(as_uuid=True), nullable=False),
    Column(
        "user_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("emoji", String(16), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("target_type", "target_id", "user_id", name="uq_reaction_target_user"),
    CheckConstraint(f"target_type IN ({TARGET_TYPE_VALUES})", name="check_target_type"),
    CheckConstraint(f"emoji IN ({EMOJI_VALUES})", name="check_emoji"),
)

Index("idx_reactions_target", reactions_table.c.target_type, reactions_table.c.target_id)
