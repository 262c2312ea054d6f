"""Post repository interface.

This is the document store collaborator the tree services are written
against. Implementations must assign timestamps themselves and must apply
an insert together with all of its ancestor updates, or not at all.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from forum.domain.model.post import Post
from forum.domain.value import Author, PostId
from forum.domain.value.cursor import Cursor


class PostRepository(ABC):
    """Repository for Post entities.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID, including soft-deleted posts.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def insert(self, post: Post) -> Post:
        """Create a post and propagate aggregates to its ancestors atomically.

        Every ancestor in ``post.path[:-1]`` gets its descendant count
        incremented and its bump overwritten with the new post's author and
        header. The immediate parent also gets its child count incremented.
        The new post's create, edit and bump times are assigned by the store
        and are equal to the bump time written to the ancestors.

        Args:
            post: The post to create, with path and parent already final

        Returns:
            The post as stored

        Raises:
            NotFoundError: If any ancestor does not exist (nothing is written)
            InvalidArgumentError: If the path does not extend the stored path
                of the parent (nothing is written)
            TransactionConflictError: If a concurrent writer won a race
            StorageTransactionError: If the write failed, including an
                identifier collision
        """
        pass

    @abstractmethod
    async def find_children(
        self, parent: Optional[PostId], cursor: Cursor, limit: int
    ) -> List[Post]:
        """Find non-deleted direct children of a post, one page at a time.

        Args:
            parent: Parent post ID (None selects top-level sections)
            cursor: Ordering and resume position
            limit: Maximum number of posts to return

        Returns:
            Posts ordered by the cursor, starting strictly after it
        """
        pass

    @abstractmethod
    async def find_tree(self, root: PostId, cursor: Cursor, limit: int) -> List[Post]:
        """Find a post and all of its non-deleted descendants, one page at a time.

        Descendants of a deleted post are still returned.

        Args:
            root: Root post ID
            cursor: Ordering and resume position
            limit: Maximum number of posts to return

        Returns:
            Posts ordered by the cursor, starting strictly after it
        """
        pass

    @abstractmethod
    async def mark_deleted(self, post_id: PostId, who: Author, why: str) -> Post:
        """Set the soft-delete marker on a single post.

        Ancestor counters and descendants are left untouched.

        Returns:
            The updated post

        Raises:
            NotFoundError: If the post does not exist
        """
        pass

    @abstractmethod
    async def update_content(
        self,
        post_id: PostId,
        header: Optional[str] = None,
        body: Optional[str] = None,
    ) -> Post:
        """Update header and/or body and stamp the edit time.

        Fields passed as None are left unchanged. The bump is not touched.

        Returns:
            The updated post

        Raises:
            NotFoundError: If the post does not exist
        """
        pass

    @abstractmethod
    async def increment_view_count(self, post_id: PostId) -> None:
        """Atomically increment the view count by 1.

        Raises:
            NotFoundError: If the post does not exist
        """
        pass
