"""Tree query engine: ordered, resumable listings over the content tree."""

from typing import Optional

import logfire

from forum.domain.error import InvalidArgumentError, NotFoundError
from forum.domain.model.page import PostPage
from forum.domain.model.post import Post
from forum.domain.repository import PostRepository
from forum.domain.value import PostId
from forum.domain.value.cursor import Cursor

from .base import Service


def _page(posts: list[Post], cursor: Cursor, limit: int) -> PostPage:
    # A full page only says there may be more; a short page is definitely the end
    if len(posts) == limit:
        return PostPage(items=posts, next_cursor=cursor.advance(posts[-1]))
    return PostPage(items=posts, next_cursor=None)


def _check_limit(limit: int) -> None:
    if limit < 1:
        raise InvalidArgumentError(f"Page size must be positive, got {limit}")


class TreeQueryService(Service):
    """Domain service for reading posts and paginated views of the tree."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize tree query service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def get_post(self, post_id: PostId) -> Post:
        """Get a single post, whether or not it has been soft-deleted.

        Raises:
            NotFoundError: If no post has this ID
        """
        with logfire.span("tree_query_service.get_post", post_id=post_id):
            post = await self.post_repository.find_by_id(post_id)
            if post is None:
                logfire.warn("Post not found", post_id=post_id)
                raise NotFoundError("Post", post_id)
            return post

    async def get_children(
        self, parent: Optional[PostId], cursor: Cursor, limit: int
    ) -> PostPage:
        """Get one page of the non-deleted direct children of a post.

        Args:
            parent: Parent post ID (None lists top-level sections)
            cursor: Ordering and resume position
            limit: Page size

        Returns:
            The page, with a continuation cursor if it came back full
        """
        _check_limit(limit)
        with logfire.span(
            "tree_query_service.get_children",
            parent_id=parent,
            order=cursor.sort_field.value,
            limit=limit,
        ):
            posts = await self.post_repository.find_children(parent, cursor, limit)
            page = _page(posts, cursor, limit)
            logfire.info(
                "Children retrieved",
                parent_id=parent,
                count=len(posts),
                exhausted=page.exhausted,
            )
            return page

    async def get_tree(self, root: PostId, cursor: Cursor, limit: int) -> PostPage:
        """Get one page of a post and all of its non-deleted descendants.

        Descendants of a soft-deleted post are still listed.

        Args:
            root: Root post ID
            cursor: Ordering and resume position
            limit: Page size

        Returns:
            The page, with a continuation cursor if it came back full
        """
        _check_limit(limit)
        with logfire.span(
            "tree_query_service.get_tree",
            root_id=root,
            order=cursor.sort_field.value,
            limit=limit,
        ):
            posts = await self.post_repository.find_tree(root, cursor, limit)
            page = _page(posts, cursor, limit)
            logfire.info(
                "Tree retrieved",
                root_id=root,
                count=len(posts),
                exhausted=page.exhausted,
            )
            return page
