"""Accept invitation use case."""

import logfire
from pydantic import BaseModel

from invitations.application.usecase.base import BaseUseCase
from invitations.application.usecase.invitation.common import (
    NavigationResponse,
    require_user,
)
from invitations.domain.service import CoreFacade, InvitationService
from invitations.util.token import short_token


class AcceptInvitationRequest(BaseModel):
    """Accept invitation request."""

    token: str
    user_id: int


class AcceptInvitationUseCase(BaseUseCase):
    """Use case for redeeming an invitation token."""

    def __init__(self, invitation_service: InvitationService, core: CoreFacade) -> None:
        """Initialize accept invitation use case.

        Args:
            invitation_service: Invitation domain service
            core: Host platform facade
        """
        self.invitation_service = invitation_service
        self.core = core

    async def execute(self, request: AcceptInvitationRequest) -> NavigationResponse:
        """Redeem the token for the requesting user.

        Args:
            request: Token and redeeming user

        Returns:
            Where the user goes next

        Raises:
            NotFoundError: If the user does not exist
            UnknownTokenError: If the token is unknown or already used up
            ForbiddenError: If the invitation is no longer authorized
        """
        with logfire.span(
            "accept_invitation",
            token=short_token(request.token),
            user_id=request.user_id,
        ):
            user = require_user(self.core, request.user_id)
            navigation = await self.invitation_service.redeem(request.token, user)
            return NavigationResponse.of(navigation)
