"""Delete section use case."""

from datetime import datetime

from pydantic import BaseModel

from forum.domain.service import PostLifecycleService
from forum.domain.value import Author, PostId, UserId


class DeleteSectionRequest(BaseModel):
    """Delete section request."""

    section_id: str
    user_id: str  # Who is deleting
    user_name: str | None = None
    reason: str


class DeleteSectionResponse(BaseModel):
    """Delete section response."""

    section_id: str
    deleted_at: datetime


class DeleteSectionUseCase:
    """Use case for soft-deleting a section.

    Threads in the section are not touched.
    """

    def __init__(self, post_lifecycle_service: PostLifecycleService) -> None:
        self.post_lifecycle_service = post_lifecycle_service

    async def execute(self, request: DeleteSectionRequest) -> DeleteSectionResponse:
        post = await self.post_lifecycle_service.delete_post(
            PostId(request.section_id),
            who=Author(id=UserId(request.user_id), name=request.user_name),
            why=request.reason,
        )
        return DeleteSectionResponse(section_id=post.id, deleted_at=post.deleted.when)
