"""create_posts

Create the content tree schema:
- Posts (sections, threads and replies in one table, materialized path)

Revision ID: 3c1f0a9d5e27
Revises:
Create Date: 2026-10-19 10:12:44.318205

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a9d5e27"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # POSTS table (every node of the tree)
    # ========================================================================
    op.create_table(
        "posts",
        sa.Column("id", sa.String(32), nullable=False),
        sa.Column("path", postgresql.ARRAY(sa.String(32)), nullable=False),
        sa.Column("parent", sa.String(32), nullable=True),
        sa.Column("sort_index", sa.Integer(), server_default="0", nullable=False),
        sa.Column("header", sa.Text(), server_default="", nullable=False),
        sa.Column("body", sa.Text(), server_default="", nullable=False),
        sa.Column("author_id", sa.String(255), nullable=False),
        sa.Column("author_name", sa.String(255), nullable=True),
        sa.Column("child_count", sa.Integer(), server_default="0", nullable=False),
        sa.Column(
            "descendant_count", sa.Integer(), server_default="0", nullable=False
        ),
        sa.Column("view_count", sa.Integer(), server_default="0", nullable=False),
        sa.Column("bump_time", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("bump_author_id", sa.String(255), nullable=True),
        sa.Column("bump_author_name", sa.String(255), nullable=True),
        sa.Column("bump_head", sa.Text(), nullable=True),
        sa.Column("deleted_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("deleted_by_id", sa.String(255), nullable=True),
        sa.Column("deleted_by_name", sa.String(255), nullable=True),
        sa.Column("deleted_reason", sa.Text(), nullable=True),
        sa.Column(
            "create_time",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "edit_time",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("cardinality(path) >= 1", name="path_not_empty"),
        sa.CheckConstraint("child_count >= 0", name="child_count_non_negative"),
        sa.CheckConstraint(
            "descendant_count >= 0", name="descendant_count_non_negative"
        ),
    )

    # Children listings, one index per ordering
    op.create_index("idx_posts_parent_create_time", "posts", ["parent", "create_time"])
    op.create_index("idx_posts_parent_bump_time", "posts", ["parent", "bump_time"])
    op.create_index("idx_posts_parent_sort_index", "posts", ["parent", "sort_index"])

    # Subtree listings: path @> ARRAY[root]
    op.create_index("idx_posts_path", "posts", ["path"], postgresql_using="gin")


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_posts_path", table_name="posts")
    op.drop_index("idx_posts_parent_sort_index", table_name="posts")
    op.drop_index("idx_posts_parent_bump_time", table_name="posts")
    op.drop_index("idx_posts_parent_create_time", table_name="posts")
    op.drop_table("posts")
