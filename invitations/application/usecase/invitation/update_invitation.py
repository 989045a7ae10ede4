"""Update invitation use case."""

from pydantic import BaseModel

from invitations.application.usecase.base import BaseUseCase
from invitations.application.usecase.invitation.common import (
    InvitationItem,
    require_user,
)
from invitations.config import Settings
from invitations.domain.service import CoreFacade, InvitationService
from invitations.domain.value import InvitationForm


class UpdateInvitationRequest(BaseModel):
    """Request to edit an existing invitation."""

    user_id: int
    token: str
    form: InvitationForm


class UpdateInvitationUseCase(BaseUseCase):
    """Use case for editing an invitation; its link keeps working."""

    def __init__(
        self,
        invitation_service: InvitationService,
        core: CoreFacade,
        settings: Settings,
    ) -> None:
        self.invitation_service = invitation_service
        self.core = core
        self.settings = settings

    async def execute(self, request: UpdateInvitationRequest) -> InvitationItem:
        """Replace the invitation's properties.

        Raises:
            NotFoundError: If the user does not exist
            UnknownTokenError: If the token is unknown
            ForbiddenError: If the user may not manage the invitation
            ValidationError: If the form is invalid
        """
        user = require_user(self.core, request.user_id)
        with self.core.acting_as(user):
            invitation = await self.invitation_service.update_invitation(
                request.token, user, request.form
            )
        return InvitationItem.of(
            invitation,
            self.invitation_service.get_type(invitation.type_id),
            self.settings.invitations.link_base_url,
        )
