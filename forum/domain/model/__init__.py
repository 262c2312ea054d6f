"""Domain model entities for the forum."""

from forum.domain.model.page import PostPage
from forum.domain.model.post import Post

__all__ = [
    "Post",
    "PostPage",
]
