"""Shared configuration for invitation entities and host snapshots."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable entity base.

    Projects, users, roles and invitations are snapshots: a change produces
    a new instance (``model_copy(update=...)``) that the service persists,
    never an in-place edit.
    """

    model_config = ConfigDict(frozen=True, from_attributes=True)
