"""Invitation use cases."""

from invitations.application.usecase.invitation.accept_invitation import (
    AcceptInvitationRequest,
    AcceptInvitationUseCase,
)
from invitations.application.usecase.invitation.common import (
    InvitationItem,
    NavigationResponse,
)
from invitations.application.usecase.invitation.create_invitation import (
    CreateInvitationRequest,
    CreateInvitationResponse,
    CreateInvitationUseCase,
)
from invitations.application.usecase.invitation.get_edit_properties import (
    GetEditPropertiesRequest,
    GetEditPropertiesUseCase,
)
from invitations.application.usecase.invitation.get_invitations import (
    GetInvitationsRequest,
    GetInvitationsResponse,
    GetInvitationsUseCase,
)
from invitations.application.usecase.invitation.process_invitation import (
    ProcessInvitationRequest,
    ProcessInvitationResponse,
    ProcessInvitationUseCase,
)
from invitations.application.usecase.invitation.revoke_invitation import (
    RevokeInvitationRequest,
    RevokeInvitationUseCase,
)
from invitations.application.usecase.invitation.update_invitation import (
    UpdateInvitationRequest,
    UpdateInvitationUseCase,
)

__all__ = [
    "AcceptInvitationRequest",
    "AcceptInvitationUseCase",
    "CreateInvitationRequest",
    "CreateInvitationResponse",
    "CreateInvitationUseCase",
    "GetEditPropertiesRequest",
    "GetEditPropertiesUseCase",
    "GetInvitationsRequest",
    "GetInvitationsResponse",
    "GetInvitationsUseCase",
    "InvitationItem",
    "NavigationResponse",
    "ProcessInvitationRequest",
    "ProcessInvitationResponse",
    "ProcessInvitationUseCase",
    "RevokeInvitationRequest",
    "RevokeInvitationUseCase",
    "UpdateInvitationRequest",
    "UpdateInvitationUseCase",
]
