"""Thread use cases."""

from .create_thread import (
    CreateThreadRequest,
    CreateThreadResponse,
    CreateThreadUseCase,
)
from .delete_thread import (
    DeleteThreadRequest,
    DeleteThreadResponse,
    DeleteThreadUseCase,
)
from .list_threads import ListThreadsRequest, ListThreadsResponse, ListThreadsUseCase
from .update_thread import (
    UpdateThreadRequest,
    UpdateThreadResponse,
    UpdateThreadUseCase,
)

__all__ = [
    "CreateThreadRequest",
    "CreateThreadResponse",
    "CreateThreadUseCase",
    "DeleteThreadRequest",
    "DeleteThreadResponse",
    "DeleteThreadUseCase",
    "ListThreadsRequest",
    "ListThreadsResponse",
    "ListThreadsUseCase",
    "UpdateThreadRequest",
    "UpdateThreadResponse",
    "UpdateThreadUseCase",
]
