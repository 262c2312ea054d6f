"""PostgreSQL implementation of Post repository."""

from datetime import datetime
from typing import Any, List, Optional

from sqlalchemy import Select, and_, case, func, or_, select, update
from sqlalchemy.exc import DBAPIError, IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.error import (
    InvalidArgumentError,
    NotFoundError,
    StorageQueryError,
    StorageTransactionError,
    TransactionConflictError,
)
from forum.domain.model import Post
from forum.domain.repository import PostRepository
from forum.domain.value import Author, PostId
from forum.domain.value.cursor import Cursor, SortField
from forum.persistence.mappers import post_to_dict, row_to_post
from forum.persistence.tables import posts_table

# serialization_failure, deadlock_detected
CONFLICT_SQLSTATES = frozenset({"40001", "40P01"})


def _sqlstate(error: DBAPIError) -> Optional[str]:
    orig = error.orig
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _now(self) -> datetime:
        # clock_timestamp() rather than now(): now() is frozen for the whole
        # transaction and would give every insert in a session the same time
        result = await self.session.execute(select(func.clock_timestamp()))
        return result.scalar_one()

    def _sort_column(self, cursor: Cursor) -> Any:
        if cursor.sort_field == SortField.CREATE_TIME:
            return posts_table.c.create_time
        if cursor.sort_field == SortField.BUMP_TIME:
            return posts_table.c.bump_time
        return posts_table.c.sort_index

    def _paginate(self, stmt: Select, cursor: Cursor, limit: int) -> Select:
        """Apply ordering, start-after and limit for a cursor."""
        column = self._sort_column(cursor)
        # Byte-wise collation so id tiebreaks are stable across locales
        post_id = posts_table.c.id.collate("C")
        start = cursor.start_value()

        if start is not None:
            after = column < start if cursor.descending else column > start
            if cursor.after_id is None:
                stmt = stmt.where(after)
            else:
                if cursor.descending:
                    tiebreak = post_id < cursor.after_id
                else:
                    tiebreak = post_id > cursor.after_id
                stmt = stmt.where(or_(after, and_(column == start, tiebreak)))

        if cursor.descending:
            stmt = stmt.order_by(column.desc(), post_id.desc())
        else:
            stmt = stmt.order_by(column.asc(), post_id.asc())

        return stmt.limit(limit)

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageQueryError("find_by_id", post_id, str(e)) from e
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def insert(self, post: Post) -> Post:
        """Create a post and propagate aggregates to its ancestors atomically.

        Runs in a savepoint: ancestor rows are locked in id order (so two
        inserts sharing ancestors cannot deadlock on lock ordering), then
        incremented in SQL, then the leaf is inserted. Any failure rolls the
        savepoint back, leaving no partial propagation behind.
        """
        ancestors = post.path[:-1]
        bump_values = {
            "bump_author_id": post.author.id,
            "bump_author_name": post.author.name,
            "bump_head": post.header,
        }

        try:
            async with self.session.begin_nested():
                now = await self._now()

                if ancestors:
                    locked = await self.session.execute(
                        select(posts_table.c.id, posts_table.c.path)
                        .where(posts_table.c.id.in_(ancestors))
                        .order_by(posts_table.c.id)
                        .with_for_update()
                    )
                    found = {row.id: list(row.path) for row in locked}
                    missing = [a for a in ancestors if a not in found]
                    if missing:
                        raise NotFoundError("Post", missing[0])
                    if found[post.parent] != ancestors:
                        raise InvalidArgumentError(
                            f"Path of {post.id} does not extend the path of "
                            f"its parent {post.parent}"
                        )

                    await self.session.execute(
                        update(posts_table)
                        .where(posts_table.c.id.in_(ancestors))
                        .values(
                            descendant_count=posts_table.c.descendant_count + 1,
                            child_count=posts_table.c.child_count
                            + case((posts_table.c.id == post.parent, 1), else_=0),
                            bump_time=now,
                            **bump_values,
                        )
                    )

                result = await self.session.execute(
                    posts_table.insert()
                    .values(
                        **post_to_dict(post),
                        bump_time=now,
                        create_time=now,
                        edit_time=now,
                        **bump_values,
                    )
                    .returning(posts_table)
                )
                row = result.fetchone()
        except IntegrityError as e:
            raise StorageTransactionError("insert", post.id, str(e.orig)) from e
        except DBAPIError as e:
            if _sqlstate(e) in CONFLICT_SQLSTATES:
                raise TransactionConflictError("insert", post.id, str(e.orig)) from e
            raise StorageTransactionError("insert", post.id, str(e)) from e
        except SQLAlchemyError as e:
            raise StorageTransactionError("insert", post.id, str(e)) from e

        return row_to_post(row._asdict())

    async def find_children(
        self, parent: Optional[PostId], cursor: Cursor, limit: int
    ) -> List[Post]:
        """Find non-deleted direct children of a post."""
        if parent is None:
            stmt = select(posts_table).where(posts_table.c.parent.is_(None))
        else:
            stmt = select(posts_table).where(posts_table.c.parent == parent)
        stmt = stmt.where(posts_table.c.deleted_at.is_(None))
        stmt = self._paginate(stmt, cursor, limit)

        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageQueryError("find_children", parent, str(e)) from e
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def find_tree(self, root: PostId, cursor: Cursor, limit: int) -> List[Post]:
        """Find a post and all of its non-deleted descendants."""
        stmt = (
            select(posts_table)
            .where(posts_table.c.path.contains([root]))
            .where(posts_table.c.deleted_at.is_(None))
        )
        stmt = self._paginate(stmt, cursor, limit)

        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageQueryError("find_tree", root, str(e)) from e
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def mark_deleted(self, post_id: PostId, who: Author, why: str) -> Post:
        """Set the soft-delete marker on a single post."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(
                deleted_at=func.clock_timestamp(),
                deleted_by_id=who.id,
                deleted_by_name=who.name,
                deleted_reason=why,
            )
            .returning(posts_table)
        )
        return await self._update_one("mark_deleted", post_id, stmt)

    async def update_content(
        self,
        post_id: PostId,
        header: Optional[str] = None,
        body: Optional[str] = None,
    ) -> Post:
        """Update header and/or body and stamp the edit time."""
        values: dict[str, Any] = {"edit_time": func.clock_timestamp()}
        if header is not None:
            values["header"] = header
        if body is not None:
            values["body"] = body

        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(**values)
            .returning(posts_table)
        )
        return await self._update_one("update_content", post_id, stmt)

    async def increment_view_count(self, post_id: PostId) -> None:
        """Atomically increment the view count by 1."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(view_count=posts_table.c.view_count + 1)
            .returning(posts_table)
        )
        await self._update_one("increment_view_count", post_id, stmt)

    async def _update_one(self, operation: str, post_id: PostId, stmt: Any) -> Post:
        """Run a single-row UPDATE ... RETURNING and map the result."""
        try:
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
        except SQLAlchemyError as e:
            raise StorageTransactionError(operation, post_id, str(e)) from e

        if row is None:
            raise NotFoundError("Post", post_id)
        return row_to_post(row._asdict())
