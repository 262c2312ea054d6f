"""List threads use case."""

from pydantic import BaseModel, Field

from forum.application.usecase.common import PostItem, cursor_token, resolve_cursor
from forum.config import ForumSettings
from forum.domain.service import TreeQueryService
from forum.domain.value import PostId
from forum.domain.value.cursor import BumpTimeDescending


class ListThreadsRequest(BaseModel):
    """List threads request."""

    section_id: str
    cursor: str | None = None  # Token from a previous response
    limit: int | None = Field(default=None, ge=1)


class ListThreadsResponse(BaseModel):
    """List threads response."""

    threads: list[PostItem]
    next_cursor: str | None


class ListThreadsUseCase:
    """Use case for listing the threads of a section.

    Threads come most recently active first unless the cursor token
    selects another ordering.
    """

    def __init__(
        self, tree_query_service: TreeQueryService, forum_settings: ForumSettings
    ) -> None:
        self.tree_query_service = tree_query_service
        self.forum_settings = forum_settings

    async def execute(self, request: ListThreadsRequest) -> ListThreadsResponse:
        cursor = resolve_cursor(request.cursor, BumpTimeDescending())
        limit = request.limit or self.forum_settings.default_page_size
        page = await self.tree_query_service.get_children(
            PostId(request.section_id), cursor, limit
        )
        return ListThreadsResponse(
            threads=[PostItem.from_post(p) for p in page.items],
            next_cursor=cursor_token(page.next_cursor),
        )
