"""Response items and helpers shared by forum use cases."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from forum.domain.model.post import Post
from forum.domain.value.cursor import Cursor, decode_cursor, encode_cursor


class PostItem(BaseModel):
    """A post as returned to callers."""

    post_id: str
    path: list[str]
    parent_id: str | None
    index: int
    header: str
    body: str
    author_id: str
    author_name: str | None
    child_count: int
    descendant_count: int
    view_count: int
    bump_time: datetime | None
    bump_author_id: str | None
    bump_head: str | None
    deleted_by: str | None
    deleted_reason: str | None
    deleted_at: datetime | None
    create_time: datetime
    edit_time: datetime

    @classmethod
    def from_post(cls, post: Post) -> "PostItem":
        bump = post.bump
        deleted = post.deleted
        return cls(
            post_id=post.id,
            path=list(post.path),
            parent_id=post.parent,
            index=post.index,
            header=post.header,
            body=post.body,
            author_id=post.author.id,
            author_name=post.author.name,
            child_count=post.child_count,
            descendant_count=post.descendant_count,
            view_count=post.view_count,
            bump_time=bump.time if bump else None,
            bump_author_id=bump.author.id if bump and bump.author else None,
            bump_head=bump.head if bump else None,
            deleted_by=deleted.who.id if deleted else None,
            deleted_reason=deleted.why if deleted else None,
            deleted_at=deleted.when if deleted else None,
            create_time=post.create_time,
            edit_time=post.edit_time,
        )


def resolve_cursor(token: str | None, default: Cursor) -> Cursor:
    """Decode a client cursor token, or start a fresh listing."""
    if token is None:
        return default
    return decode_cursor(token)


def cursor_token(cursor: Optional[Cursor]) -> str | None:
    return encode_cursor(cursor) if cursor is not None else None
