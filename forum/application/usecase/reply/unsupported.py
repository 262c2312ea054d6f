"""Reply operations that are part of the forum surface but not built yet."""

from pydantic import BaseModel

from forum.domain.error import NotSupportedError


class ListRepliesRequest(BaseModel):
    parent_id: str
    cursor: str | None = None
    limit: int | None = None


class CreateDraftReplyRequest(BaseModel):
    parent_path: list[str]
    author_id: str


class UpdateReplyRequest(BaseModel):
    reply_id: str
    subject: str | None = None
    body: str | None = None


class DeleteReplyRequest(BaseModel):
    reply_id: str
    user_id: str
    reason: str


class InstallReplyRequest(BaseModel):
    draft_id: str


class ListRepliesUseCase:
    """Direct replies of a post, without the rest of the subtree."""

    async def execute(self, request: ListRepliesRequest) -> None:
        raise NotSupportedError("list_replies")


class CreateDraftReplyUseCase:
    """Reply saved but not yet visible in the tree."""

    async def execute(self, request: CreateDraftReplyRequest) -> None:
        raise NotSupportedError("create_draft_reply")


class UpdateReplyUseCase:
    async def execute(self, request: UpdateReplyRequest) -> None:
        raise NotSupportedError("update_reply")


class DeleteReplyUseCase:
    async def execute(self, request: DeleteReplyRequest) -> None:
        raise NotSupportedError("delete_reply")


class InstallReplyUseCase:
    """Publish a draft reply into the tree."""

    async def execute(self, request: InstallReplyRequest) -> None:
        raise NotSupportedError("install_reply")
