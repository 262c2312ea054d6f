"""Shared base for forum entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Frozen entity.

    Stores never mutate an entity in place. Counter updates, edits and
    deletion markers are applied with ``model_copy`` and the copy replaces
    the stored record.
    """

    model_config = ConfigDict(frozen=True)
