"""Get post use case."""

from pydantic import BaseModel

from forum.application.usecase.common import PostItem
from forum.domain.service import PostLifecycleService, TreeQueryService
from forum.domain.value import PostId


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str


class GetPostResponse(BaseModel):
    """Get post response."""

    post: PostItem


class GetPostUseCase:
    """Use case for viewing a single post.

    Soft-deleted posts are returned too, with their deletion marker.
    """

    def __init__(
        self,
        tree_query_service: TreeQueryService,
        post_lifecycle_service: PostLifecycleService,
    ) -> None:
        """Initialize get post use case.

        Args:
            tree_query_service: Tree query domain service
            post_lifecycle_service: Post lifecycle domain service
        """
        self.tree_query_service = tree_query_service
        self.post_lifecycle_service = post_lifecycle_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Count the view, then return the post including it.

        Raises:
            NotFoundError: If the post does not exist
        """
        post_id = PostId(request.post_id)
        await self.post_lifecycle_service.record_view(post_id)
        post = await self.tree_query_service.get_post(post_id)
        return GetPostResponse(post=PostItem.from_post(post))
