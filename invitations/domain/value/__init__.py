"""Domain value objects for invitations."""

from invitations.domain.value.identifiers import GroupKey, ProjectId, RoleId, UserId
from invitations.domain.value.types import (
    InvalidProperty,
    InvitationForm,
    Navigation,
    Permission,
    Redirect,
    View,
)

__all__ = [
    # Identifiers
    "UserId",
    "ProjectId",
    "RoleId",
    "GroupKey",
    # Types
    "Permission",
    "InvalidProperty",
    "InvitationForm",
    "Navigation",
    "Redirect",
    "View",
]
