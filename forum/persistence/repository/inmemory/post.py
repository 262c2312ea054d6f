"""In-memory post repository for testing."""

import asyncio
from datetime import datetime, timedelta, timezone
from typing import Optional

from forum.domain.error import (
    InvalidArgumentError,
    NotFoundError,
    StorageTransactionError,
)
from forum.domain.model.post import Post
from forum.domain.repository.post import PostRepository
from forum.domain.value import Author, Bump, DeleteInfo, PostId
from forum.domain.value.cursor import Cursor


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    Inserts are serialized behind a lock and every ancestor is checked
    before anything is written, so a failed insert leaves no trace.
    """

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}
        self._lock = asyncio.Lock()
        self._last_time: Optional[datetime] = None

    def _now(self) -> datetime:
        """Store clock. Strictly increasing, like a server timestamp."""
        now = datetime.now(timezone.utc)
        if self._last_time is not None and now <= self._last_time:
            now = self._last_time + timedelta(microseconds=1)
        self._last_time = now
        return now

    def _get(self, post_id: PostId) -> Post:
        post = self._posts.get(post_id)
        if post is None:
            raise NotFoundError("Post", post_id)
        return post

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def insert(self, post: Post) -> Post:
        """Create a post and propagate aggregates to its ancestors atomically."""
        async with self._lock:
            if post.id in self._posts:
                raise StorageTransactionError(
                    "insert", post.id, "identifier already exists"
                )
            ancestors = post.path[:-1]
            for ancestor_id in ancestors:
                self._get(ancestor_id)
            if ancestors and self._posts[post.parent].path != ancestors:
                raise InvalidArgumentError(
                    f"Path of {post.id} does not extend the path of its parent "
                    f"{post.parent}"
                )

            now = self._now()
            bump = Bump(time=now, author=post.author, head=post.header)

            updated: dict[PostId, Post] = {}
            for ancestor_id in ancestors:
                ancestor = self._posts[ancestor_id]
                child = 1 if ancestor_id == post.parent else 0
                updated[ancestor_id] = ancestor.model_copy(
                    update={
                        "descendant_count": ancestor.descendant_count + 1,
                        "child_count": ancestor.child_count + child,
                        "bump": bump,
                    }
                )
            leaf = post.model_copy(
                update={"bump": bump, "create_time": now, "edit_time": now}
            )

            # Apply everything together
            self._posts.update(updated)
            self._posts[leaf.id] = leaf
            return leaf

    def _page(self, posts: list[Post], cursor: Cursor, limit: int) -> list[Post]:
        posts = [p for p in posts if p.deleted is None and cursor.follows(p)]
        posts.sort(key=cursor.sort_key, reverse=cursor.descending)
        return posts[:limit]

    async def find_children(
        self, parent: Optional[PostId], cursor: Cursor, limit: int
    ) -> list[Post]:
        """Find non-deleted direct children of a post."""
        children = [p for p in self._posts.values() if p.parent == parent]
        return self._page(children, cursor, limit)

    async def find_tree(self, root: PostId, cursor: Cursor, limit: int) -> list[Post]:
        """Find a post and all of its non-deleted descendants."""
        tree = [p for p in self._posts.values() if root in p.path]
        return self._page(tree, cursor, limit)

    async def mark_deleted(self, post_id: PostId, who: Author, why: str) -> Post:
        """Set the soft-delete marker on a single post."""
        post = self._get(post_id)
        deleted = post.model_copy(
            update={"deleted": DeleteInfo(who=who, why=why, when=self._now())}
        )
        self._posts[post_id] = deleted
        return deleted

    async def update_content(
        self,
        post_id: PostId,
        header: Optional[str] = None,
        body: Optional[str] = None,
    ) -> Post:
        """Update header and/or body and stamp the edit time."""
        post = self._get(post_id)
        changes: dict[str, object] = {"edit_time": self._now()}
        if header is not None:
            changes["header"] = header
        if body is not None:
            changes["body"] = body
        updated = post.model_copy(update=changes)
        self._posts[post_id] = updated
        return updated

    async def increment_view_count(self, post_id: PostId) -> None:
        """Atomically increment the view count by 1."""
        post = self._get(post_id)
        self._posts[post_id] = post.model_copy(
            update={"view_count": post.view_count + 1}
        )
