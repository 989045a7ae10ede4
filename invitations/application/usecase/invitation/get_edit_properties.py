"""Get edit properties use case."""

from typing import Optional

from pydantic import BaseModel

from invitations.application.usecase.invitation.common import (
    require_project,
    require_user,
)
from invitations.domain.service import CoreFacade, EditPropertiesView, InvitationService


class GetEditPropertiesRequest(BaseModel):
    """Request for the create/edit invitation form."""

    user_id: int
    project_id: str
    type_id: str
    token: Optional[str] = None  # Set when editing an existing invitation


class GetEditPropertiesUseCase:
    """Use case for prefilling the create/edit invitation form."""

    def __init__(self, invitation_service: InvitationService, core: CoreFacade) -> None:
        self.invitation_service = invitation_service
        self.core = core

    async def execute(self, request: GetEditPropertiesRequest) -> EditPropertiesView:
        user = require_user(self.core, request.user_id)
        project = require_project(self.core, request.project_id)
        with self.core.acting_as(user):
            return await self.invitation_service.get_edit_properties_view(
                request.type_id, user, project, request.token
            )
