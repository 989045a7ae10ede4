"""Create invitation use case."""

import logfire
from pydantic import BaseModel

from invitations.application.usecase.base import BaseUseCase
from invitations.application.usecase.invitation.common import (
    InvitationItem,
    require_project,
    require_user,
)
from invitations.config import Settings
from invitations.domain.service import CoreFacade, InvitationService
from invitations.domain.value import InvitationForm


class CreateInvitationRequest(BaseModel):
    """Request to create an invitation."""

    user_id: int
    project_id: str
    type_id: str
    form: InvitationForm


class CreateInvitationResponse(BaseModel):
    """Response after creating an invitation."""

    invitation: InvitationItem


class CreateInvitationUseCase(BaseUseCase):
    """Use case for issuing a new invitation link."""

    def __init__(
        self,
        invitation_service: InvitationService,
        core: CoreFacade,
        settings: Settings,
    ) -> None:
        """Initialize use case.

        Args:
            invitation_service: Invitation domain service
            core: Host platform facade
            settings: Application settings
        """
        self.invitation_service = invitation_service
        self.core = core
        self.settings = settings

    async def execute(
        self, request: CreateInvitationRequest
    ) -> CreateInvitationResponse:
        """Create an invitation.

        Args:
            request: Create invitation request

        Returns:
            The created invitation with its shareable URL

        Raises:
            NotFoundError: If the user, project or type does not exist
            ForbiddenError: If the user may not create this invitation
            ValidationError: If the form is invalid
        """
        with logfire.span(
            "create_invitation",
            user_id=request.user_id,
            project_id=request.project_id,
            type_id=request.type_id,
        ):
            user = require_user(self.core, request.user_id)
            project = require_project(self.core, request.project_id)

            with self.core.acting_as(user):
                invitation = await self.invitation_service.create_invitation(
                    request.type_id, user, request.form, project
                )

            invitation_type = self.invitation_service.get_type(invitation.type_id)
            return CreateInvitationResponse(
                invitation=InvitationItem.of(
                    invitation,
                    invitation_type,
                    self.settings.invitations.link_base_url,
                )
            )
