"""Process invitation use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from invitations.application.usecase.invitation.common import (
    NavigationResponse,
    require_user,
)
from invitations.domain.error import UnknownTokenError
from invitations.domain.service import CoreFacade, InvitationService
from invitations.util.token import short_token


class ProcessInvitationRequest(BaseModel):
    """Request made when someone opens an invitation link."""

    token: str
    user_id: Optional[int] = None  # None for anonymous visitors


class ProcessInvitationResponse(BaseModel):
    """Landing outcome for an invitation link."""

    valid: bool
    navigation: Optional[NavigationResponse] = None
    message: Optional[str] = None


class ProcessInvitationUseCase:
    """Use case for the invitation landing page.

    Anonymous visitors are sent to registration, signed-in users see the
    invitation with its welcome text before accepting it.
    """

    def __init__(self, invitation_service: InvitationService, core: CoreFacade) -> None:
        self.invitation_service = invitation_service
        self.core = core

    async def execute(
        self, request: ProcessInvitationRequest
    ) -> ProcessInvitationResponse:
        with logfire.span("process_invitation", token=short_token(request.token)):
            user = None
            if request.user_id is not None:
                user = require_user(self.core, request.user_id)

            with self.core.acting_as(user):
                try:
                    navigation = (
                        await self.invitation_service.process_invitation_request(
                            request.token, user
                        )
                    )
                except UnknownTokenError:
                    logfire.info(
                        "Invitation not available", token=short_token(request.token)
                    )
                    return ProcessInvitationResponse(
                        valid=False, message="Invitation not available"
                    )

            return ProcessInvitationResponse(
                valid=True, navigation=NavigationResponse.of(navigation)
            )
