"""In-memory repository implementations for testing."""

from .post import InMemoryPostRepository

__all__ = [
    "InMemoryPostRepository",
]
