"""Post lifecycle: soft delete and edit."""

from typing import Optional

import logfire

from forum.domain.error import InvalidArgumentError
from forum.domain.model.post import Post
from forum.domain.repository import PostRepository
from forum.domain.value import Author, PostId

from .base import Service


class PostLifecycleService(Service):
    """Domain service for changing posts after they were inserted."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post lifecycle service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def delete_post(self, post_id: PostId, who: Author, why: str) -> Post:
        """Mark a post deleted.

        Nothing is physically removed. Ancestor counters are left as they
        are and descendants stay visible. Deleting twice overwrites the
        marker.

        Args:
            post_id: Post to delete
            who: Who deleted it
            why: Reason given

        Returns:
            The post with its deletion marker set

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span(
            "post_lifecycle_service.delete_post",
            post_id=post_id,
            deleted_by=who.id,
        ):
            deleted = await self.post_repository.mark_deleted(post_id, who, why)
            logfire.info(
                "Post marked deleted", post_id=post_id, deleted_by=who.id, reason=why
            )
            return deleted

    async def edit_post(
        self,
        post_id: PostId,
        header: Optional[str] = None,
        body: Optional[str] = None,
    ) -> Post:
        """Replace the header and/or body of a post.

        Stamps the edit time. Edits are not activity for bump purposes.

        Raises:
            InvalidArgumentError: If neither header nor body is given
            NotFoundError: If the post does not exist
        """
        if header is None and body is None:
            raise InvalidArgumentError("Nothing to edit: header and body are both None")

        with logfire.span(
            "post_lifecycle_service.edit_post",
            post_id=post_id,
            header_changed=header is not None,
            body_changed=body is not None,
        ):
            updated = await self.post_repository.update_content(
                post_id, header=header, body=body
            )
            logfire.info("Post edited", post_id=post_id, edit_time=updated.edit_time)
            return updated

    async def record_view(self, post_id: PostId) -> None:
        """Count one view of a post."""
        await self.post_repository.increment_view_count(post_id)
