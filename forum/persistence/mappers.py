"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Optional

from pydantic import ValidationError

from forum.domain.error import DecodeError
from forum.domain.model import Post
from forum.domain.value import Author, Bump, DeleteInfo, PostId, UserId


def _author(author_id: Optional[str], name: Optional[str]) -> Optional[Author]:
    if author_id is None:
        return None
    return Author(id=UserId(author_id), name=name)


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model

    Raises:
        DecodeError: If the row does not have the shape of a post
    """
    identifier = str(row.get("id", "<unknown>"))
    try:
        bump = Bump(
            time=row["bump_time"],
            author=_author(row.get("bump_author_id"), row.get("bump_author_name")),
            head=row.get("bump_head"),
        )

        deleted = None
        if row.get("deleted_at") is not None:
            who = _author(row.get("deleted_by_id"), row.get("deleted_by_name"))
            if who is None:
                raise ValueError("deletion marker has no deleting user")
            why = row.get("deleted_reason")
            if why is None:
                raise ValueError("deletion marker has no reason")
            deleted = DeleteInfo(
                who=who,
                why=why,
                when=row["deleted_at"],
            )

        post = Post(
            path=[PostId(p) for p in row["path"]],
            parent=PostId(row["parent"]) if row.get("parent") is not None else None,
            index=row["sort_index"],
            header=row["header"],
            body=row["body"],
            author=Author(id=UserId(row["author_id"]), name=row.get("author_name")),
            child_count=row["child_count"],
            descendant_count=row["descendant_count"],
            view_count=row["view_count"],
            bump=bump,
            deleted=deleted,
            create_time=row["create_time"],
            edit_time=row["edit_time"],
        )
    except (KeyError, TypeError, ValueError, ValidationError) as e:
        raise DecodeError("Post", identifier, str(e)) from e

    if not post.path or post.id != identifier:
        raise DecodeError("Post", identifier, f"path {post.path!r} does not end in id")
    return post


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Timestamps are left out; the database assigns them.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": post.id,
        "path": list(post.path),
        "parent": post.parent,
        "sort_index": post.index,
        "header": post.header,
        "body": post.body,
        "author_id": post.author.id,
        "author_name": post.author.name,
        "child_count": post.child_count,
        "descendant_count": post.descendant_count,
        "view_count": post.view_count,
    }
