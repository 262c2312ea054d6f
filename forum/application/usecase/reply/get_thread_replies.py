"""Get thread replies use case."""

from pydantic import BaseModel, Field

from forum.application.usecase.common import PostItem, cursor_token, resolve_cursor
from forum.config import ForumSettings
from forum.domain.service import TreeQueryService
from forum.domain.value import PostId
from forum.domain.value.cursor import CreateTimeAscending


class GetThreadRepliesRequest(BaseModel):
    """Get thread replies request."""

    thread_id: str
    cursor: str | None = None  # Token from a previous response
    limit: int | None = Field(default=None, ge=1)


class GetThreadRepliesResponse(BaseModel):
    """Get thread replies response.

    The thread post itself is part of ``replies`` when its position in
    the ordering falls on this page.
    """

    replies: list[PostItem]
    next_cursor: str | None


class GetThreadRepliesUseCase:
    """Use case for reading a whole thread as a flat, ordered list."""

    def __init__(
        self, tree_query_service: TreeQueryService, forum_settings: ForumSettings
    ) -> None:
        """Initialize get thread replies use case.

        Args:
            tree_query_service: Tree query domain service
            forum_settings: Forum settings (default page size)
        """
        self.tree_query_service = tree_query_service
        self.forum_settings = forum_settings

    async def execute(
        self, request: GetThreadRepliesRequest
    ) -> GetThreadRepliesResponse:
        """List the thread and its non-deleted descendants, oldest first."""
        cursor = resolve_cursor(request.cursor, CreateTimeAscending())
        limit = request.limit or self.forum_settings.default_page_size
        page = await self.tree_query_service.get_tree(
            PostId(request.thread_id), cursor, limit
        )
        return GetThreadRepliesResponse(
            replies=[PostItem.from_post(p) for p in page.items],
            next_cursor=cursor_token(page.next_cursor),
        )
