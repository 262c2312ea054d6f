"""PostgreSQL repository implementations."""

from forum.persistence.repository.post import PostgresPostRepository

__all__ = [
    "PostgresPostRepository",
]
