"""SQLAlchemy table definitions for solution discussions.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (identity mirror + stats)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("display_name", String(255), nullable=False),
    Column("email", String(255), nullable=True),
    Column("comments_posted", Integer, nullable=False, server_default="0"),
    Column("upvotes_received", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# SOLUTIONS TABLE (reference only, owned by the analysis service)
# ============================================================================
solutions_table = Table(
    "solutions",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("owner_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("title", String(255), nullable=False, server_default=""),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# COMMENTS TABLE (one level of threading, soft delete)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "solution_id",
        UUID,
        ForeignKey("solutions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("author_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("content", Text, nullable=False),
    Column("parent_id", UUID, ForeignKey("comments.id"), nullable=True),
    Column("reply_ids", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("upvote_count", Integer, nullable=False, server_default="0"),
    Column("downvote_count", Integer, nullable=False, server_default="0"),
    Column("is_edited", Boolean, nullable=False, server_default="false"),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "char_length(content) BETWEEN 1 AND 2000", name="comment_content_length"
    ),
    CheckConstraint(
        "upvote_count >= 0 AND downvote_count >= 0", name="comment_counts_non_negative"
    ),
)

Index(
    "idx_comments_solution_created",
    comments_table.c.solution_id,
    comments_table.c.created_at,
)
Index(
    "idx_comments_author_created",
    comments_table.c.author_id,
    comments_table.c.created_at,
)
Index("idx_comments_parent_id", comments_table.c.parent_id)

# ============================================================================
# COMMENT VOTES TABLE (ledger, one row per user per comment)
# ============================================================================
comment_votes_table = Table(
    "comment_votes",
    metadata,
    Column(
        "comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "vote_type",
        postgresql.ENUM("up", "down", name="vote_type", create_type=False),
        nullable=False,
    ),
    Column("cast_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"),
    PrimaryKeyConstraint("comment_id", "user_id", name="pk_comment_votes"),
)

Index("idx_comment_votes_user_id", comment_votes_table.c.user_id)
