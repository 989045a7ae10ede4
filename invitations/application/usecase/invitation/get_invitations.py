"""Get invitations use case."""

from pydantic import BaseModel

from invitations.application.usecase.invitation.common import (
    InvitationItem,
    require_project,
    require_user,
)
from invitations.config import Settings
from invitations.domain.service import CoreFacade, InvitationService


class InvitationTypeItem(BaseModel):
    """Invitation type the user may create."""

    type_id: str
    description: str
    description_view_path: str


class GetInvitationsRequest(BaseModel):
    """Get invitations request."""

    user_id: int
    project_id: str


class GetInvitationsResponse(BaseModel):
    """Get invitations response."""

    invitations: list[InvitationItem]
    available_types: list[InvitationTypeItem]
    total: int


class GetInvitationsUseCase:
    """Use case for the project's invitations tab."""

    def __init__(
        self,
        invitation_service: InvitationService,
        core: CoreFacade,
        settings: Settings,
    ) -> None:
        self.invitation_service = invitation_service
        self.core = core
        self.settings = settings

    async def execute(self, request: GetInvitationsRequest) -> GetInvitationsResponse:
        """List the invitations of a project the user may manage."""
        user = require_user(self.core, request.user_id)
        project = require_project(self.core, request.project_id)

        with self.core.acting_as(user):
            invitations = await self.invitation_service.list_invitations(project, user)
            types = self.invitation_service.available_types(user, project)

        base_url = self.settings.invitations.link_base_url
        items = [
            InvitationItem.of(
                invitation,
                self.invitation_service.get_type(invitation.type_id),
                base_url,
            )
            for invitation in invitations
        ]
        return GetInvitationsResponse(
            invitations=items,
            available_types=[
                InvitationTypeItem(
                    type_id=t.id,
                    description=t.description,
                    description_view_path=t.description_view_path,
                )
                for t in types
            ],
            total=len(items),
        )
