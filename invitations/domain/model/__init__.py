"""Domain model entities for invitations."""

from invitations.domain.model.invitation import Invitation, JoinProjectInvitation
from invitations.domain.model.project import Project
from invitations.domain.model.record import InvitationRecord
from invitations.domain.model.role import Group, Role
from invitations.domain.model.user import User

__all__ = [
    "Invitation",
    "JoinProjectInvitation",
    "InvitationRecord",
    "Project",
    "Role",
    "Group",
    "User",
]
