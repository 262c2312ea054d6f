"""Tree mutator: inserts posts and keeps ancestor aggregates consistent."""

import logfire

from forum.config import ForumSettings
from forum.domain.error import (
    InvalidArgumentError,
    StorageTransactionError,
    TransactionConflictError,
)
from forum.domain.model.post import Post
from forum.domain.repository import PostRepository
from forum.domain.value import MAX_INDEX, MIN_INDEX, PostId

from .base import Service


def truncate_path(path: list[PostId], max_depth: int) -> list[PostId]:
    """Cap a path at ``max_depth`` elements.

    The leaf keeps its identity: its id is written into the last permitted
    slot and the ancestors that would have sat below that depth are dropped
    from the recorded path. Those ancestors receive no propagation.
    """
    if len(path) <= max_depth:
        return list(path)
    return list(path[: max_depth - 1]) + [path[-1]]


class TreeMutationService(Service):
    """Domain service for placing posts into the content tree."""

    def __init__(
        self, post_repository: PostRepository, forum_settings: ForumSettings
    ) -> None:
        """Initialize tree mutation service.

        Args:
            post_repository: Post repository
            forum_settings: Depth limit and retry budget
        """
        self.post_repository = post_repository
        self.max_depth = forum_settings.max_depth
        self.insert_attempts = forum_settings.insert_attempts

    async def insert(self, candidate: Post) -> list[PostId]:
        """Insert a post and update every ancestor in one transaction.

        The candidate's path must already end in its own freshly generated
        id. Counters, bump and deletion marker on the candidate are ignored;
        the stored post starts from zero.

        Args:
            candidate: Post to insert

        Returns:
            The recorded path, truncated if it exceeded the depth limit

        Raises:
            InvalidArgumentError: If the path is empty, the author is missing,
                the index is out of range or the path disagrees with the
                stored ancestry
            NotFoundError: If an ancestor does not exist
            StorageTransactionError: If the insert could not be committed
        """
        if not candidate.path:
            raise InvalidArgumentError("Cannot insert a post with an empty path")
        if not candidate.author.id:
            raise InvalidArgumentError("Cannot insert a post without an author")
        if not MIN_INDEX < candidate.index <= MAX_INDEX:
            raise InvalidArgumentError(
                f"Index {candidate.index} outside ({MIN_INDEX}, {MAX_INDEX}]"
            )

        path = truncate_path(candidate.path, self.max_depth)
        post = candidate.model_copy(
            update={
                "path": path,
                "parent": path[-2] if len(path) > 1 else None,
                "child_count": 0,
                "descendant_count": 0,
                "view_count": 0,
                "bump": None,
                "deleted": None,
            }
        )

        with logfire.span(
            "tree_mutation_service.insert",
            post_id=post.id,
            parent_id=post.parent,
            depth=post.depth,
            author_id=post.author.id,
        ):
            if len(path) < len(candidate.path):
                logfire.warn(
                    "Post path truncated",
                    post_id=post.id,
                    requested_depth=len(candidate.path),
                    max_depth=self.max_depth,
                )

            attempt = 0
            while True:
                attempt += 1
                try:
                    saved = await self.post_repository.insert(post)
                except TransactionConflictError as e:
                    logfire.warn(
                        "Insert conflicted with a concurrent writer",
                        post_id=post.id,
                        attempt=attempt,
                        error=str(e),
                    )
                    if attempt >= self.insert_attempts:
                        raise StorageTransactionError(
                            "insert",
                            post.id,
                            f"gave up after {attempt} conflicting attempts",
                        ) from e
                    continue

                logfire.info(
                    "Post inserted",
                    post_id=saved.id,
                    parent_id=saved.parent,
                    depth=saved.depth,
                    ancestors=saved.depth - 1,
                )
                return saved.path
