"""Shared request/response models and host lookups for invitation use cases."""

from typing import Any, Literal, Optional

from pydantic import BaseModel

from invitations.domain.error import NotFoundError
from invitations.domain.model import Invitation, Project, User
from invitations.domain.service import CoreFacade, InvitationType
from invitations.domain.value import Navigation, ProjectId, Redirect, UserId


class InvitationItem(BaseModel):
    """Invitation in responses."""

    token: str
    invitation_url: str
    type_id: str
    project_id: str
    name: str
    description: str
    welcome_text: str
    multi: bool
    reusable: bool
    created_by_user_id: Optional[int] = None

    @classmethod
    def of(
        cls,
        invitation: Invitation,
        invitation_type: InvitationType,
        link_base_url: str,
    ) -> "InvitationItem":
        return cls(
            token=invitation.token,
            invitation_url=f"{link_base_url}/invitations/{invitation.token}",
            type_id=invitation.type_id,
            project_id=invitation.project.project_id,
            name=invitation.name,
            description=invitation_type.describe(invitation),
            welcome_text=invitation.welcome_text,
            multi=invitation.multi,
            reusable=invitation.is_reusable,
            created_by_user_id=invitation.created_by_user_id,
        )


class NavigationResponse(BaseModel):
    """Where the host should send the user next."""

    kind: Literal["redirect", "view"]
    url: Optional[str] = None
    view_path: Optional[str] = None
    model: dict[str, Any] = {}

    @classmethod
    def of(cls, navigation: Navigation) -> "NavigationResponse":
        if isinstance(navigation, Redirect):
            return cls(kind="redirect", url=navigation.url)
        return cls(kind="view", view_path=navigation.path, model=navigation.model)


def require_user(core: CoreFacade, user_id: int) -> User:
    """Resolve a user with system authority.

    Raises:
        NotFoundError: If the user does not exist
    """
    with core.run_as_system():
        user = core.get_user(UserId(user_id))
    if user is None:
        raise NotFoundError("User", str(user_id))
    return user


def require_project(core: CoreFacade, project_id: str) -> Project:
    """Resolve a project with system authority.

    Raises:
        NotFoundError: If the project does not exist
    """
    with core.run_as_system():
        project = core.find_project(ProjectId(project_id))
    if project is None:
        raise NotFoundError("Project", project_id)
    return project
