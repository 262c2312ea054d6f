"""Post entity.

Sections, threads and replies are all posts. What a post is depends only on
its depth: sections live at depth 1, threads at depth 2, replies below that.

Every post stores its full ancestry in ``path`` (root first, itself last), so
direct children are found by equality on ``parent`` and whole subtrees by a
containment test on ``path``, without walking the tree at read time.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import AwareDatetime, Field

from forum.domain.model.common import DomainModel
from forum.domain.value import MAX_INDEX, MIN_INDEX, Author, Bump, DeleteInfo, PostId


def _now() -> datetime:
    return datetime.now(timezone.utc)


class Post(DomainModel):
    """A node in the content tree.

    Counters and ``bump`` are aggregates maintained by the store when
    descendants are inserted:
    - child_count: posts whose parent is this post
    - descendant_count: posts whose path contains this post (other than itself)
    - bump: most recent insertion anywhere in this subtree
    """

    path: list[PostId] = Field(default_factory=list)
    parent: Optional[PostId] = None
    index: int = Field(default=0, gt=MIN_INDEX, le=MAX_INDEX)
    header: str = ""
    body: str = ""
    author: Author
    child_count: int = Field(default=0, ge=0)
    descendant_count: int = Field(default=0, ge=0)
    view_count: int = Field(default=0, ge=0)
    bump: Optional[Bump] = None
    deleted: Optional[DeleteInfo] = None
    create_time: AwareDatetime = Field(default_factory=_now)
    edit_time: AwareDatetime = Field(default_factory=_now)

    @property
    def id(self) -> PostId:
        """Identifier of this post, always the last element of its path."""
        return self.path[-1]

    @property
    def depth(self) -> int:
        return len(self.path)

    @property
    def is_deleted(self) -> bool:
        return self.deleted is not None
