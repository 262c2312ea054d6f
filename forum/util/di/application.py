"""Application layer DI providers."""

from dishka import Scope, provide

from forum.application.usecase.post import GetPostUseCase
from forum.application.usecase.reply import (
    CreateDraftReplyUseCase,
    CreateReplyUseCase,
    DeleteReplyUseCase,
    GetThreadRepliesUseCase,
    InstallReplyUseCase,
    ListRepliesUseCase,
    UpdateReplyUseCase,
)
from forum.application.usecase.section import (
    CreateSectionUseCase,
    DeleteSectionUseCase,
    ListSectionsUseCase,
)
from forum.application.usecase.thread import (
    CreateThreadUseCase,
    DeleteThreadUseCase,
    ListThreadsUseCase,
    UpdateThreadUseCase,
)
from forum.config import ForumSettings
from forum.domain.service import (
    PostLifecycleService,
    TreeMutationService,
    TreeQueryService,
)
from forum.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Section use cases
    @provide(scope=Scope.REQUEST)
    def get_create_section_use_case(
        self, tree_mutation_service: TreeMutationService
    ) -> CreateSectionUseCase:
        """Provide create section use case."""
        return CreateSectionUseCase(tree_mutation_service=tree_mutation_service)

    @provide(scope=Scope.REQUEST)
    def get_list_sections_use_case(
        self, tree_query_service: TreeQueryService, forum_settings: ForumSettings
    ) -> ListSectionsUseCase:
        """Provide list sections use case."""
        return ListSectionsUseCase(
            tree_query_service=tree_query_service, forum_settings=forum_settings
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_section_use_case(
        self, post_lifecycle_service: PostLifecycleService
    ) -> DeleteSectionUseCase:
        """Provide delete section use case."""
        return DeleteSectionUseCase(post_lifecycle_service=post_lifecycle_service)

    # Thread use cases
    @provide(scope=Scope.REQUEST)
    def get_create_thread_use_case(
        self, tree_mutation_service: TreeMutationService
    ) -> CreateThreadUseCase:
        """Provide create thread use case."""
        return CreateThreadUseCase(tree_mutation_service=tree_mutation_service)

    @provide(scope=Scope.REQUEST)
    def get_list_threads_use_case(
        self, tree_query_service: TreeQueryService, forum_settings: ForumSettings
    ) -> ListThreadsUseCase:
        """Provide list threads use case."""
        return ListThreadsUseCase(
            tree_query_service=tree_query_service, forum_settings=forum_settings
        )

    @provide(scope=Scope.REQUEST)
    def get_update_thread_use_case(
        self, post_lifecycle_service: PostLifecycleService
    ) -> UpdateThreadUseCase:
        """Provide update thread use case."""
        return UpdateThreadUseCase(post_lifecycle_service=post_lifecycle_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_thread_use_case(
        self, post_lifecycle_service: PostLifecycleService
    ) -> DeleteThreadUseCase:
        """Provide delete thread use case."""
        return DeleteThreadUseCase(post_lifecycle_service=post_lifecycle_service)

    # Reply use cases
    @provide(scope=Scope.REQUEST)
    def get_create_reply_use_case(
        self, tree_mutation_service: TreeMutationService
    ) -> CreateReplyUseCase:
        """Provide create reply use case."""
        return CreateReplyUseCase(tree_mutation_service=tree_mutation_service)

    @provide(scope=Scope.REQUEST)
    def get_thread_replies_use_case(
        self, tree_query_service: TreeQueryService, forum_settings: ForumSettings
    ) -> GetThreadRepliesUseCase:
        """Provide get thread replies use case."""
        return GetThreadRepliesUseCase(
            tree_query_service=tree_query_service, forum_settings=forum_settings
        )

    # Reply operations without an implementation yet
    @provide(scope=Scope.REQUEST)
    def get_list_replies_use_case(self) -> ListRepliesUseCase:
        return ListRepliesUseCase()

    @provide(scope=Scope.REQUEST)
    def get_create_draft_reply_use_case(self) -> CreateDraftReplyUseCase:
        return CreateDraftReplyUseCase()

    @provide(scope=Scope.REQUEST)
    def get_update_reply_use_case(self) -> UpdateReplyUseCase:
        return UpdateReplyUseCase()

    @provide(scope=Scope.REQUEST)
    def get_delete_reply_use_case(self) -> DeleteReplyUseCase:
        return DeleteReplyUseCase()

    @provide(scope=Scope.REQUEST)
    def get_install_reply_use_case(self) -> InstallReplyUseCase:
        return InstallReplyUseCase()

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_post_use_case(
        self,
        tree_query_service: TreeQueryService,
        post_lifecycle_service: PostLifecycleService,
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(
            tree_query_service=tree_query_service,
            post_lifecycle_service=post_lifecycle_service,
        )
