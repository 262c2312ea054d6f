"""Pagination cursors.

A cursor is a pure value: the field to order by, the direction, and where the
previous page stopped. Nothing about a listing is kept on the server, so a
cursor can be handed to a client as an opaque token and resumed later.

Pages start strictly after the cursor's value. The id of the last item is
carried along as a tiebreak so that posts sharing a sort value are neither
skipped nor repeated across pages.
"""

import base64
from abc import abstractmethod
from datetime import datetime, timezone
from enum import Enum
from typing import TYPE_CHECKING, Annotated, Any, ClassVar, Literal, Optional, Union

from pydantic import AwareDatetime, Field, TypeAdapter, ValidationError

from forum.domain.error import InvalidArgumentError
from forum.domain.value.common import ValueObject
from forum.domain.value.identifiers import PostId
from forum.domain.value.types import MAX_INDEX, MIN_INDEX

if TYPE_CHECKING:
    from forum.domain.model.post import Post

EARLIEST = datetime.min.replace(tzinfo=timezone.utc)


class SortField(str, Enum):
    """Post fields a listing can be ordered by."""

    CREATE_TIME = "create_time"
    BUMP_TIME = "bump_time"
    INDEX = "index"


class SortDirection(str, Enum):
    """Sort direction of a listing."""

    ASCENDING = "asc"
    DESCENDING = "desc"


class Cursor(ValueObject):
    """Ordering strategy plus resume position for one listing."""

    sort_field: ClassVar[SortField]
    direction: ClassVar[SortDirection]

    after_id: Optional[PostId] = None

    @property
    def descending(self) -> bool:
        return self.direction == SortDirection.DESCENDING

    @abstractmethod
    def start_value(self) -> Any:
        """Value the page starts strictly after (None means unbounded)."""

    @abstractmethod
    def sort_value(self, post: "Post") -> Any:
        """Value of this cursor's field on a post."""

    def advance(self, last: "Post") -> "Cursor":
        """Cursor for the page following one that ended with ``last``."""
        return self.model_copy(
            update={"after": self.sort_value(last), "after_id": last.id}
        )

    def follows(self, post: "Post") -> bool:
        """Whether ``post`` belongs after this cursor's resume position."""
        start = self.start_value()
        if start is None:
            return True
        value = self.sort_value(post)
        if value == start:
            if self.after_id is None:
                return False
            if self.descending:
                return post.id < self.after_id
            return post.id > self.after_id
        if self.descending:
            return value < start
        return value > start

    def sort_key(self, post: "Post") -> tuple[Any, str]:
        return (self.sort_value(post), post.id)


class CreateTimeAscending(Cursor):
    """Oldest first. Used for reply trees."""

    sort_field: ClassVar[SortField] = SortField.CREATE_TIME
    direction: ClassVar[SortDirection] = SortDirection.ASCENDING

    kind: Literal["create_time_asc"] = "create_time_asc"
    after: Optional[AwareDatetime] = None

    def start_value(self) -> datetime:
        return self.after if self.after is not None else EARLIEST

    def sort_value(self, post: "Post") -> datetime:
        return post.create_time


class BumpTimeDescending(Cursor):
    """Most recently active first. Used for threads and sections.

    A post that was never bumped sorts as if it had been bumped right now.
    The first page has no upper bound.
    """

    sort_field: ClassVar[SortField] = SortField.BUMP_TIME
    direction: ClassVar[SortDirection] = SortDirection.DESCENDING

    kind: Literal["bump_time_desc"] = "bump_time_desc"
    after: Optional[AwareDatetime] = None

    def start_value(self) -> Optional[datetime]:
        return self.after

    def sort_value(self, post: "Post") -> datetime:
        if post.bump is None:
            return datetime.now(timezone.utc)
        return post.bump.time


class IndexAscending(Cursor):
    """Manual ordering. Only meaningful for top-level sections."""

    sort_field: ClassVar[SortField] = SortField.INDEX
    direction: ClassVar[SortDirection] = SortDirection.ASCENDING

    kind: Literal["index_asc"] = "index_asc"
    after: Optional[Annotated[int, Field(ge=MIN_INDEX, le=MAX_INDEX)]] = None

    def start_value(self) -> int:
        return self.after if self.after is not None else MIN_INDEX

    def sort_value(self, post: "Post") -> int:
        return post.index


AnyCursor = Annotated[
    Union[CreateTimeAscending, BumpTimeDescending, IndexAscending],
    Field(discriminator="kind"),
]

_cursor_adapter: TypeAdapter[AnyCursor] = TypeAdapter(AnyCursor)


def encode_cursor(cursor: Cursor) -> str:
    """Serialize a cursor to an opaque URL-safe token."""
    return base64.urlsafe_b64encode(cursor.model_dump_json().encode("utf-8")).decode(
        "ascii"
    )


def decode_cursor(token: str) -> Cursor:
    """Parse a token produced by :func:`encode_cursor`.

    Raises:
        InvalidArgumentError: If the token is not a valid cursor
    """
    try:
        raw = base64.urlsafe_b64decode(token.encode("ascii"))
        return _cursor_adapter.validate_json(raw)
    except (ValueError, ValidationError) as e:
        raise InvalidArgumentError(f"Malformed cursor token: {token!r}") from e
