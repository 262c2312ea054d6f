"""Section use cases."""

from .create_section import (
    CreateSectionRequest,
    CreateSectionResponse,
    CreateSectionUseCase,
)
from .delete_section import (
    DeleteSectionRequest,
    DeleteSectionResponse,
    DeleteSectionUseCase,
)
from .list_sections import (
    ListSectionsRequest,
    ListSectionsResponse,
    ListSectionsUseCase,
)

__all__ = [
    "CreateSectionRequest",
    "CreateSectionResponse",
    "CreateSectionUseCase",
    "DeleteSectionRequest",
    "DeleteSectionResponse",
    "DeleteSectionUseCase",
    "ListSectionsRequest",
    "ListSectionsResponse",
    "ListSectionsUseCase",
]
