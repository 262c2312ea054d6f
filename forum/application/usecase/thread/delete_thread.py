"""Delete thread use case."""

from datetime import datetime

from pydantic import BaseModel

from forum.domain.service import PostLifecycleService
from forum.domain.value import Author, PostId, UserId


class DeleteThreadRequest(BaseModel):
    """Delete thread request."""

    thread_id: str
    user_id: str  # Who is deleting
    user_name: str | None = None
    reason: str


class DeleteThreadResponse(BaseModel):
    """Delete thread response."""

    thread_id: str
    deleted_at: datetime


class DeleteThreadUseCase:
    """Use case for soft-deleting a thread.

    The thread drops out of section listings; its replies are kept.
    """

    def __init__(self, post_lifecycle_service: PostLifecycleService) -> None:
        self.post_lifecycle_service = post_lifecycle_service

    async def execute(self, request: DeleteThreadRequest) -> DeleteThreadResponse:
        post = await self.post_lifecycle_service.delete_post(
            PostId(request.thread_id),
            who=Author(id=UserId(request.user_id), name=request.user_name),
            why=request.reason,
        )
        return DeleteThreadResponse(thread_id=post.id, deleted_at=post.deleted.when)
