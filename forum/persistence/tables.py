"""SQLAlchemy table definitions for the forum.

These table definitions are used with SQLAlchemy core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# POSTS TABLE
# ============================================================================
# Sections, threads and replies share one table. Nested values of the
# document (author, bump, deletion marker) are flattened into columns so
# that they can be filtered and ordered on.
posts_table = Table(
    "posts",
    metadata,
    Column("id", String(32), primary_key=True),
    Column("path", ARRAY(String(32)), nullable=False),  # Root first, self last
    Column("parent", String(32), nullable=True),  # NULL for sections
    Column("sort_index", Integer, nullable=False, server_default="0"),
    Column("header", Text, nullable=False, server_default=""),
    Column("body", Text, nullable=False, server_default=""),
    Column("author_id", String(255), nullable=False),
    Column("author_name", String(255), nullable=True),
    Column("child_count", Integer, nullable=False, server_default="0"),
    Column("descendant_count", Integer, nullable=False, server_default="0"),
    Column("view_count", Integer, nullable=False, server_default="0"),
    # A post counts as its own first activity, so every row has a bump
    Column("bump_time", TIMESTAMP(timezone=True), nullable=False),
    Column("bump_author_id", String(255), nullable=True),
    Column("bump_author_name", String(255), nullable=True),
    Column("bump_head", Text, nullable=True),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
    Column("deleted_by_id", String(255), nullable=True),
    Column("deleted_by_name", String(255), nullable=True),
    Column("deleted_reason", Text, nullable=True),
    Column(
        "create_time", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "edit_time", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("cardinality(path) >= 1", name="path_not_empty"),
    CheckConstraint("child_count >= 0", name="child_count_non_negative"),
    CheckConstraint("descendant_count >= 0", name="descendant_count_non_negative"),
)

Index("idx_posts_parent_create_time", posts_table.c.parent, posts_table.c.create_time)
Index("idx_posts_parent_bump_time", posts_table.c.parent, posts_table.c.bump_time)
Index("idx_posts_parent_sort_index", posts_table.c.parent, posts_table.c.sort_index)
Index("idx_posts_path", posts_table.c.path, postgresql_using="gin")
