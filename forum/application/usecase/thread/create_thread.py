"""Create thread use case."""

from pydantic import BaseModel

from forum.domain.model.post import Post
from forum.domain.service import TreeMutationService
from forum.domain.value import Author, UserId, new_post_id


class CreateThreadRequest(BaseModel):
    """Create thread request."""

    section_id: str
    subject: str
    body: str
    author_id: str
    author_name: str | None = None


class CreateThreadResponse(BaseModel):
    """Create thread response."""

    thread_id: str
    path: list[str]


class CreateThreadUseCase:
    """Use case for starting a thread in a section."""

    def __init__(self, tree_mutation_service: TreeMutationService) -> None:
        """Initialize create thread use case.

        Args:
            tree_mutation_service: Tree mutation domain service
        """
        self.tree_mutation_service = tree_mutation_service

    async def execute(self, request: CreateThreadRequest) -> CreateThreadResponse:
        """Insert a new post directly under the section.

        The section is bumped and its counters incremented.

        Raises:
            NotFoundError: If the section does not exist
            StorageTransactionError: If the insert could not be committed
        """
        post = Post(
            path=[request.section_id, new_post_id()],
            header=request.subject,
            body=request.body,
            author=Author(id=UserId(request.author_id), name=request.author_name),
        )
        path = await self.tree_mutation_service.insert(post)
        return CreateThreadResponse(thread_id=path[-1], path=list(path))
