"""Value objects embedded in forum posts."""

from typing import Optional

from pydantic import AwareDatetime

from forum.domain.value.common import ValueObject
from forum.domain.value.identifiers import UserId


# Section positions are stored as a 32-bit integer. The lowest value is
# reserved as the start of an index-ordered listing.
MIN_INDEX = -(2**31)
MAX_INDEX = 2**31 - 1


class Author(ValueObject):
    """Opaque reference to an external identity.

    Only the identifier is authoritative. The display name is a convenience
    copy taken at write time and is never refreshed.
    """

    id: UserId
    name: Optional[str] = None


class Bump(ValueObject):
    """Most recent activity anywhere in a post's subtree.

    Used purely for sorting and display.
    """

    time: AwareDatetime
    author: Optional[Author] = None
    head: Optional[str] = None


class DeleteInfo(ValueObject):
    """Soft-delete marker. Its presence hides a post from listings."""

    who: Author
    why: str
    when: AwareDatetime
