"""One page of a paginated listing."""

from typing import Optional

from forum.domain.model.common import DomainModel
from forum.domain.model.post import Post
from forum.domain.value.cursor import AnyCursor


class PostPage(DomainModel):
    """Posts of one page plus the cursor for the next one.

    ``next_cursor`` is set whenever the page came back full. A full page
    only means more posts *may* exist; ``None`` means the listing is
    definitely exhausted.
    """

    items: list[Post]
    next_cursor: Optional[AnyCursor] = None

    @property
    def exhausted(self) -> bool:
        return self.next_cursor is None
