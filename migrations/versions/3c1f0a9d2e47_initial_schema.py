"""initial_schema

Create the comment tree schema:
- Comments (materialized path threading, any depth)
- Comment reactions (emoji reactions, duplicates allowed)

Revision ID: 3c1f0a9d2e47
Revises:
Create Date: 2026-10-16 12:04:51.318204

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a9d2e47"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE comment_type AS ENUM ('root', 'branch');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column("comment_id", sa.UUID(), nullable=False),
        sa.Column(
            "comment_type",
            postgresql.ENUM("root", "branch", name="comment_type", create_type=False),
            nullable=False,
        ),
        sa.Column("commenter_account_id", sa.UUID(), nullable=False),
        sa.Column("commenter_username", sa.String(255), nullable=False),
        sa.Column(
            "commented_timestamp",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("comment_text", sa.Text(), nullable=False),
        sa.Column("materialized_path", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("comment_id"),
    )
    op.create_index(
        "idx_comments_commented_timestamp", "comments", ["commented_timestamp"]
    )
    # text_pattern_ops lets LIKE 'prefix%' use the index regardless of collation
    op.execute(
        "CREATE INDEX idx_comments_materialized_path "
        "ON comments (materialized_path text_pattern_ops)"
    )

    # ========================================================================
    # COMMENT_REACTIONS table
    # ========================================================================
    op.create_table(
        "comment_reactions",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("comment_id", sa.UUID(), nullable=False),
        sa.Column("reactor_account_id", sa.UUID(), nullable=False),
        sa.Column("reactor_username", sa.String(255), nullable=False),
        sa.Column("emoji_unified_code", sa.String(64), nullable=False),
        sa.ForeignKeyConstraint(
            ["comment_id"], ["comments.comment_id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_comment_reactions_comment_id", "comment_reactions", ["comment_id"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("comment_reactions")
    op.drop_table("comments")
    op.execute("DROP TYPE IF EXISTS comment_type")
