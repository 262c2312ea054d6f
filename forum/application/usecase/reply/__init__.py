"""Reply use cases."""

from .create_reply import CreateReplyRequest, CreateReplyResponse, CreateReplyUseCase
from .get_thread_replies import (
    GetThreadRepliesRequest,
    GetThreadRepliesResponse,
    GetThreadRepliesUseCase,
)
from .unsupported import (
    CreateDraftReplyRequest,
    CreateDraftReplyUseCase,
    DeleteReplyRequest,
    DeleteReplyUseCase,
    InstallReplyRequest,
    InstallReplyUseCase,
    ListRepliesRequest,
    ListRepliesUseCase,
    UpdateReplyRequest,
    UpdateReplyUseCase,
)

__all__ = [
    "CreateDraftReplyRequest",
    "CreateDraftReplyUseCase",
    "CreateReplyRequest",
    "CreateReplyResponse",
    "CreateReplyUseCase",
    "DeleteReplyRequest",
    "DeleteReplyUseCase",
    "GetThreadRepliesRequest",
    "GetThreadRepliesResponse",
    "GetThreadRepliesUseCase",
    "InstallReplyRequest",
    "InstallReplyUseCase",
    "ListRepliesRequest",
    "ListRepliesUseCase",
    "UpdateReplyRequest",
    "UpdateReplyUseCase",
]
