"""Revoke invitation use case."""

import logfire
from pydantic import BaseModel

from invitations.application.usecase.base import BaseUseCase
from invitations.application.usecase.invitation.common import require_user
from invitations.domain.service import CoreFacade, InvitationService


class RevokeInvitationRequest(BaseModel):
    """Revoke invitation request."""

    user_id: int
    token: str


class RevokeInvitationUseCase(BaseUseCase):
    """Use case for deleting an invitation so its link stops working."""

    def __init__(self, invitation_service: InvitationService, core: CoreFacade) -> None:
        self.invitation_service = invitation_service
        self.core = core

    async def execute(self, request: RevokeInvitationRequest) -> None:
        """Revoke an invitation.

        Raises:
            NotFoundError: If the user does not exist
            UnknownTokenError: If the token is unknown
            ForbiddenError: If the user may not manage the invitation
        """
        with logfire.span("revoke_invitation", user_id=request.user_id):
            user = require_user(self.core, request.user_id)
            with self.core.acting_as(user):
                await self.invitation_service.revoke_invitation(request.token, user)
