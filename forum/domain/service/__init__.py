"""Domain services."""

from .base import Service
from .lifecycle_service import PostLifecycleService
from .mutation_service import TreeMutationService, truncate_path
from .query_service import TreeQueryService

__all__ = [
    "PostLifecycleService",
    "Service",
    "TreeMutationService",
    "TreeQueryService",
    "truncate_path",
]
