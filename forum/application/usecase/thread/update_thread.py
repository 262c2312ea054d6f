"""Update thread use case."""

from datetime import datetime

from pydantic import BaseModel

from forum.domain.service import PostLifecycleService
from forum.domain.value import PostId


class UpdateThreadRequest(BaseModel):
    """Update thread request.

    Fields left as None keep their current value.
    """

    thread_id: str
    subject: str | None = None
    body: str | None = None


class UpdateThreadResponse(BaseModel):
    """Update thread response."""

    thread_id: str
    subject: str
    body: str
    edit_time: datetime


class UpdateThreadUseCase:
    """Use case for editing a thread's subject or body."""

    def __init__(self, post_lifecycle_service: PostLifecycleService) -> None:
        """Initialize update thread use case.

        Args:
            post_lifecycle_service: Post lifecycle domain service
        """
        self.post_lifecycle_service = post_lifecycle_service

    async def execute(self, request: UpdateThreadRequest) -> UpdateThreadResponse:
        """Edit the thread post.

        Raises:
            InvalidArgumentError: If neither subject nor body is given
            NotFoundError: If the thread does not exist
        """
        post = await self.post_lifecycle_service.edit_post(
            PostId(request.thread_id), header=request.subject, body=request.body
        )
        return UpdateThreadResponse(
            thread_id=post.id,
            subject=post.header,
            body=post.body,
            edit_time=post.edit_time,
        )
