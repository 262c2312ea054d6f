"""Create section use case."""

from pydantic import BaseModel, Field

from forum.domain.model.post import Post
from forum.domain.service import TreeMutationService
from forum.domain.value import MAX_INDEX, MIN_INDEX, Author, UserId, new_post_id


class CreateSectionRequest(BaseModel):
    """Create section request."""

    subject: str
    description: str = ""
    # Position among sections, ascending
    index: int = Field(gt=MIN_INDEX, le=MAX_INDEX)
    author_id: str
    author_name: str | None = None


class CreateSectionResponse(BaseModel):
    """Create section response."""

    section_id: str
    path: list[str]


class CreateSectionUseCase:
    """Use case for creating a top-level forum section."""

    def __init__(self, tree_mutation_service: TreeMutationService) -> None:
        """Initialize create section use case.

        Args:
            tree_mutation_service: Tree mutation domain service
        """
        self.tree_mutation_service = tree_mutation_service

    async def execute(self, request: CreateSectionRequest) -> CreateSectionResponse:
        """Insert a new depth-1 post.

        Raises:
            InvalidArgumentError: If the author is missing
            StorageTransactionError: If the insert could not be committed
        """
        post = Post(
            path=[new_post_id()],
            index=request.index,
            header=request.subject,
            body=request.description,
            author=Author(id=UserId(request.author_id), name=request.author_name),
        )
        path = await self.tree_mutation_service.insert(post)
        return CreateSectionResponse(section_id=path[-1], path=list(path))
