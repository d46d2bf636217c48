"""initial_schema

Create the diary schema:
- Users (username/email/password accounts)
- Diaries (private by default, tags as a text array)
- Comments (two levels: top-level and replies)
- Reactions (one emoji per user per diary or comment)

Revision ID: 3c1f9a7d2e40
Revises:
Create Date: 2026-10-18 10:12:44.518302

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f9a7d2e40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

EMOJI = ("\u2764\ufe0f", "\U0001f602", "\U0001f62e", "\U0001f622", "\U0001f44f")


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("username", sa.String(30), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.Column("display_name", sa.String(100), nullable=True),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username", name="users_username_key"),
        sa.UniqueConstraint("email", name="users_email_key"),
    )

    # ========================================================================
    # DIARIES table
    # ========================================================================
    op.create_table(
        "diaries",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("is_public", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "tags",
            postgresql.ARRAY(sa.Text()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("length(title) > 0", name="check_title_not_empty"),
    )
    op.create_index(
        "idx_diaries_author_created", "diaries", ["author_id", "created_at"]
    )
    op.create_index(
        "idx_diaries_public_created", "diaries", ["is_public", "created_at"]
    )

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("diary_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("content", sa.String(1000), nullable=False),
        sa.Column("parent_id", sa.UUID(), nullable=True),  # NULL for top-level
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["diary_id"], ["diaries.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["parent_id"], ["comments.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("length(content) > 0", name="check_content_not_empty"),
    )
    op.create_index(
        "idx_comments_diary_created", "comments", ["diary_id", "created_at"]
    )
    op.create_index("idx_comments_parent", "comments", ["parent_id"])

    # ========================================================================
    # REACTIONS table
    # ========================================================================
    emoji_values = ", ".join(f"'{e}'" for e in EMOJI)
    op.create_table(
        "reactions",
        sa.Column("target_type", sa.String(20), nullable=False),
        sa.Column("target_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("emoji", sa.String(16), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.UniqueConstraint(
            "target_type", "target_id", "user_id", name="uq_reaction_target_user"
        ),
        sa.CheckConstraint(
            "target_type IN ('diary', 'comment')", name="check_target_type"
        ),
        sa.CheckConstraint(f"emoji IN ({emoji_values})", name="check_emoji"),
    )
    op.create_index("idx_reactions_target", "reactions", ["target_type", "target_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_reactions_target", table_name="reactions")
    op.drop_table("reactions")

    op.drop_index("idx_comments_parent", table_name="comments")
    op.drop_index("idx_comments_diary_created", table_name="comments")
    op.drop_table("comments")

    op.drop_index("idx_diaries_public_created", table_name="diaries")
    op.drop_index("idx_diaries_author_created", table_name="diaries")
    op.drop_table("diaries")

    op.drop_table("users")
