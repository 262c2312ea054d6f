"""Test configuration and helpers."""

from typing import Optional

from forum.domain.model.post import Post
from forum.domain.value import Author, PostId, UserId, new_post_id

ALICE = Author(id=UserId("alice"), name="Alice")
BOB = Author(id=UserId("bob"), name="Bob")


def make_post(
    parent_path: Optional[list[PostId]] = None,
    author: Author = ALICE,
    header: str = "",
    body: str = "",
    index: int = 0,
) -> Post:
    """Build an insert candidate below ``parent_path`` with a fresh id.

    Args:
        parent_path: Full path of the parent, or None for a section
        author: Post author
        header: Subject line
        body: Post text
        index: Manual position (sections only)

    Returns:
        Candidate post, not yet stored
    """
    return Post(
        path=[*(parent_path or []), new_post_id()],
        author=author,
        header=header,
        body=body,
        index=index,
    )
