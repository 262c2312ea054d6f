"""Unit tests for the SQL built by PostgresPostRepository."""

from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.dialects import postgresql

from forum.domain.value import PostId
from forum.domain.value.cursor import BumpTimeDescending, IndexAscending
from forum.persistence.repository import PostgresPostRepository
from forum.persistence.tables import posts_table

T0 = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def compile_page(cursor, limit: int = 10) -> str:
    repo = PostgresPostRepository(session=None)
    stmt = repo._paginate(select(posts_table), cursor, limit)
    return str(stmt.compile(dialect=postgresql.dialect()))


def test_bump_order_uses_indexed_column():
    """Ordering on the bare column lets the (parent, bump_time) index serve it."""
    sql = compile_page(BumpTimeDescending())

    assert "coalesce" not in sql.lower()
    assert "ORDER BY posts.bump_time DESC" in sql


def test_resumed_bump_page_filters_on_column():
    cursor = BumpTimeDescending(after=T0, after_id=PostId("m"))

    sql = compile_page(cursor)

    assert "posts.bump_time < " in sql
    assert "coalesce" not in sql.lower()


def test_index_order_breaks_ties_by_id():
    sql = compile_page(IndexAscending())

    assert 'ORDER BY posts.sort_index ASC, posts.id COLLATE "C" ASC' in sql
