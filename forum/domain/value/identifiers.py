"""Identifiers for forum posts.

Post identifiers are opaque random tokens. They carry no ordering and are
never reused, so the key space has to be wide enough that collisions are
negligible.
"""

import secrets
from typing import NewType

PostId = NewType("PostId", str)
UserId = NewType("UserId", str)

# 64 symbols, so every character carries 6 bits
ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+-"
ID_LENGTH = 20


def new_post_id() -> PostId:
    """Generate a fresh 120-bit post identifier."""
    return PostId("".join(secrets.choice(ALPHABET) for _ in range(ID_LENGTH)))
