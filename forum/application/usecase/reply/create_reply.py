"""Create reply use case."""

from pydantic import BaseModel, Field

from forum.domain.model.post import Post
from forum.domain.service import TreeMutationService
from forum.domain.value import Author, UserId, new_post_id

REPLY_PREFIX = "Re: "


class CreateReplyRequest(BaseModel):
    """Create reply request."""

    parent_path: list[str] = Field(min_length=1)  # Full path of the post replied to
    subject: str
    body: str
    author_id: str
    author_name: str | None = None


class CreateReplyResponse(BaseModel):
    """Create reply response.

    ``path`` is the stored path, which may be shorter than
    ``parent_path`` + 1 when the tree's depth limit was hit.
    """

    reply_id: str
    path: list[str]


class CreateReplyUseCase:
    """Use case for replying to a thread or to another reply."""

    def __init__(self, tree_mutation_service: TreeMutationService) -> None:
        """Initialize create reply use case.

        Args:
            tree_mutation_service: Tree mutation domain service
        """
        self.tree_mutation_service = tree_mutation_service

    async def execute(self, request: CreateReplyRequest) -> CreateReplyResponse:
        """Insert a reply below the given parent.

        Every ancestor on the parent path gets bumped by this reply.

        Raises:
            NotFoundError: If a post on the parent path does not exist
            StorageTransactionError: If the insert could not be committed
        """
        post = Post(
            path=[*request.parent_path, new_post_id()],
            header=REPLY_PREFIX + request.subject,
            body=request.body,
            author=Author(id=UserId(request.author_id), name=request.author_name),
        )
        path = await self.tree_mutation_service.insert(post)
        return CreateReplyResponse(reply_id=path[-1], path=list(path))
