"""Shared base for forum value objects."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Immutable value compared field by field.

    Authors, bumps, deletion markers and cursors are all values: two with
    the same fields are interchangeable.
    """

    model_config = ConfigDict(frozen=True)
