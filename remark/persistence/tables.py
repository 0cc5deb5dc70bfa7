"""SQLAlchemy table definitions for Remark.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Column,
    Enum,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# COMMENTS TABLE (materialized path threading)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("comment_id", UUID(as_uuid=True), primary_key=True),
    Column(
        "comment_type",
        Enum("root", "branch", name="comment_type", create_type=False),
        nullable=False,
    ),
    Column("commenter_account_id", UUID(as_uuid=True), nullable=False),
    Column("commenter_username", String(255), nullable=False),  # Snapshot
    Column("commented_timestamp", TIMESTAMP(timezone=True), nullable=False),
    Column("comment_text", Text, nullable=False),
    Column("materialized_path", Text, nullable=False),
)

Index("idx_comments_commented_timestamp", comments_table.c.commented_timestamp)
# Note: text_pattern_ops index for materialized_path is created in migration

# ============================================================================
# COMMENT REACTIONS TABLE
# ============================================================================
comment_reactions_table = Table(
    "comment_reactions",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column(
        "comment_id",
        UUID(as_uuid=True),
        ForeignKey("comments.comment_id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("reactor_account_id", UUID(as_uuid=True), nullable=False),
    Column("reactor_username", String(255), nullable=False),
    Column("emoji_unified_code", String(64), nullable=False),
)

Index("idx_comment_reactions_comment_id", comment_reactions_table.c.comment_id)
