"""Domain services."""

from .base import Service
from .core import CoreFacade
from .invitation_service import InvitationService
from .invitation_type import EditPropertiesView, InvitationType
from .join_project import JoinProjectInvitationType
from .registry import InvitationTypeRegistry

__all__ = [
    "CoreFacade",
    "EditPropertiesView",
    "InvitationService",
    "InvitationType",
    "InvitationTypeRegistry",
    "JoinProjectInvitationType",
    "Service",
]
