"""List sections use case."""

from pydantic import BaseModel, Field

from forum.application.usecase.common import PostItem, cursor_token, resolve_cursor
from forum.config import ForumSettings
from forum.domain.service import TreeQueryService
from forum.domain.value.cursor import IndexAscending


class ListSectionsRequest(BaseModel):
    """List sections request."""

    cursor: str | None = None  # Token from a previous response
    limit: int | None = Field(default=None, ge=1)


class ListSectionsResponse(BaseModel):
    """List sections response."""

    sections: list[PostItem]
    next_cursor: str | None


class ListSectionsUseCase:
    """Use case for listing sections in their manual order."""

    def __init__(
        self, tree_query_service: TreeQueryService, forum_settings: ForumSettings
    ) -> None:
        """Initialize list sections use case.

        Args:
            tree_query_service: Tree query domain service
            forum_settings: Forum settings (default page size)
        """
        self.tree_query_service = tree_query_service
        self.forum_settings = forum_settings

    async def execute(self, request: ListSectionsRequest) -> ListSectionsResponse:
        """List non-deleted sections ordered by index."""
        cursor = resolve_cursor(request.cursor, IndexAscending())
        limit = request.limit or self.forum_settings.section_page_size
        page = await self.tree_query_service.get_children(None, cursor, limit)
        return ListSectionsResponse(
            sections=[PostItem.from_post(p) for p in page.items],
            next_cursor=cursor_token(page.next_cursor),
        )
