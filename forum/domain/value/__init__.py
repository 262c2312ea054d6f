"""Domain value objects for the forum."""

from forum.domain.value.identifiers import PostId, UserId, new_post_id
from forum.domain.value.types import MAX_INDEX, MIN_INDEX, Author, Bump, DeleteInfo

__all__ = [
    # Identifiers
    "PostId",
    "UserId",
    "new_post_id",
    # Types
    "Author",
    "Bump",
    "DeleteInfo",
    "MAX_INDEX",
    "MIN_INDEX",
]
