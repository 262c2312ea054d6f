"""Domain layer DI providers."""

from dishka import Scope, provide

from forum.config import ForumSettings
from forum.domain.repository import PostRepository
from forum.domain.service import (
    PostLifecycleService,
    TreeMutationService,
    TreeQueryService,
)
from forum.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each request gets fresh service instances sharing one transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_tree_mutation_service(
        self, post_repository: PostRepository, forum_settings: ForumSettings
    ) -> TreeMutationService:
        """Provide tree mutation domain service."""
        return TreeMutationService(
            post_repository=post_repository, forum_settings=forum_settings
        )

    @provide
    def get_tree_query_service(
        self, post_repository: PostRepository
    ) -> TreeQueryService:
        """Provide tree query domain service."""
        return TreeQueryService(post_repository=post_repository)

    @provide
    def get_post_lifecycle_service(
        self, post_repository: PostRepository
    ) -> PostLifecycleService:
        """Provide post lifecycle domain service."""
        return PostLifecycleService(post_repository=post_repository)
