"""Join-project invitation type."""

from typing import Optional

import logfire

from invitations.domain.error import AccessDeniedError, InvitationException
from invitations.domain.model import (
    Group,
    JoinProjectInvitation,
    Project,
    Role,
    User,
)
from invitations.domain.value import (
    InvalidProperty,
    InvitationForm,
    Navigation,
    Permission,
    Redirect,
)

from .core import CoreFacade
from .invitation_type import EditPropertiesView, InvitationType

ROLE_OR_GROUP_REQUIRED = "Either the role or the group must be specified"


def default_welcome_text(user: User, project: Project) -> str:
    return f"{user.descriptive_name} invites you to join the {project.full_name} project"


class JoinProjectInvitationType(InvitationType[JoinProjectInvitation]):
    """Invites a user into a project with a role and/or a group membership.

    Issuing requires the right to change user roles in the project (and, for
    a group, the right to edit that group's members). Redemption applies the
    role and group with system authority, so the invited user needs no
    rights of their own.
    """

    def __init__(self, core: CoreFacade) -> None:
        """Initialize the invitation type.

        Args:
            core: Host platform facade
        """
        self.core = core

    @property
    def id(self) -> str:
        return "joinProjectInvitation"

    @property
    def description(self) -> str:
        return "Join project"

    @property
    def description_view_path(self) -> str:
        return self.core.plugin_resources_path("joinProjectInvitationDescription.html")

    @property
    def landing_page(self) -> str:
        return self.core.plugin_resources_path("invitationLanding.html")

    def process_invitation_request(
        self, invitation: JoinProjectInvitation, user: Optional[User]
    ) -> Navigation:
        return invitation.process_invitation_request(user, self.landing_page)

    def get_edit_properties_view(
        self,
        user: User,
        project: Project,
        invitation: Optional[JoinProjectInvitation] = None,
    ) -> EditPropertiesView:
        """Form prefill.

        Offers the roles that can be assigned in a project and the groups
        that can already view the project and whose members the user may
        edit. A fresh form preselects the smallest role that can still run
        builds.
        """
        roles = [
            role
            for role in self.core.get_available_roles()
            if role.project_association_supported
        ]
        groups = [
            group
            for group in self.core.get_available_groups()
            if Permission.VIEW_PROJECT
            in self.core.group_permissions_for_project(group, project.project_id)
            and self.core.can_add_to_remove_from_group(user, group)
        ]

        if invitation is not None:
            return EditPropertiesView(
                view_path=self.core.plugin_resources_path(
                    "joinProjectInvitationProperties.html"
                ),
                name=invitation.name,
                roles=roles,
                groups=groups,
                multiuser=invitation.multi,
                role_id=invitation.role_id,
                group_key=invitation.group_key,
                welcome_text=invitation.welcome_text,
            )

        return EditPropertiesView(
            view_path=self.core.plugin_resources_path(
                "joinProjectInvitationProperties.html"
            ),
            name=self.description,
            roles=roles,
            groups=groups,
            multiuser=True,
            role_id=self._preselected_role(roles),
            welcome_text=default_welcome_text(user, project),
        )

    @staticmethod
    def _preselected_role(roles: list[Role]) -> Optional[str]:
        can_run_builds = sorted(
            (role for role in roles if Permission.RUN_BUILD in role.permissions),
            key=lambda role: len(role.permissions),
        )
        if can_run_builds:
            return can_run_builds[0].id
        return roles[0].id if roles else None

    def validate(self, form: InvitationForm, project: Project) -> list[InvalidProperty]:
        errors = super().validate(form, project)
        if form.role_id is None and form.group_key is None:
            errors.append(
                InvalidProperty(property_name="role", message=ROLE_OR_GROUP_REQUIRED)
            )
            errors.append(
                InvalidProperty(property_name="group", message=ROLE_OR_GROUP_REQUIRED)
            )
        return errors

    def create_new_invitation(
        self, user: User, form: InvitationForm, project: Project, token: str
    ) -> JoinProjectInvitation:
        return self.create_invitation(
            inviter=user,
            name=form.name,
            token=token,
            project=project,
            role_id=form.role_id,
            group_key=form.group_key,
            multi=form.multiuser,
            welcome_text=form.welcome_text,
        )

    def create_invitation(
        self,
        inviter: User,
        name: str,
        token: str,
        project: Project,
        role_id: Optional[str],
        group_key: Optional[str],
        multi: bool,
        welcome_text: Optional[str],
    ) -> JoinProjectInvitation:
        """Build a new join-project invitation.

        Raises:
            ConstructionInvariantError: If both role_id and group_key are None
        """
        return JoinProjectInvitation.new(
            inviter=inviter,
            name=name,
            token=token,
            project=project,
            role_id=role_id,
            group_key=group_key,
            multi=multi,
            welcome_text=welcome_text,
            type_id=self.id,
        )

    def read_from(
        self, params: dict[str, str], project: Project
    ) -> JoinProjectInvitation:
        return JoinProjectInvitation.from_map(params, project, type_id=self.id)

    def is_available_for(self, holder: User, project: Project) -> bool:
        # Evaluated with system authority: holding the permission is enough,
        # even if holder cannot otherwise inspect the project.
        with self.core.run_as_system():
            return self.core.is_permission_granted_for_project(
                holder, project.project_id, Permission.CHANGE_USER_ROLES_IN_PROJECT
            )

    def is_invitation_available_for(
        self, invitation: JoinProjectInvitation, holder: User
    ) -> bool:
        try:
            if not self.core.is_permission_granted_for_project(
                holder,
                invitation.project.project_id,
                Permission.CHANGE_USER_ROLES_IN_PROJECT,
            ):
                return False
            group = self.get_group(invitation)
            return group is None or self.core.can_add_to_remove_from_group(
                holder, group
            )
        except AccessDeniedError:
            return False

    def accept(self, invitation: JoinProjectInvitation, user: User) -> Navigation:
        project = invitation.project
        with self.core.run_as_system():
            role = self.get_role(invitation)
            group = self.get_group(invitation)
            if role is None and group is None:
                raise InvitationException(
                    f"Failed to proceed invitation with a non-existing role "
                    f"'{invitation.role_id}' and group '{invitation.group_key}'"
                )
            if role is not None:
                self.core.add_role(user, role, project.project_id)
            if group is not None:
                self.core.assign_to_group(user, group)

        logfire.info(
            "Invitation applied",
            user_id=user.id,
            project_id=project.project_id,
            role_id=role.id if role else None,
            group_key=group.key if group else None,
        )

        if self._can_edit(user, project):
            return Redirect(url=f"/editProject.html?projectId={project.external_id}")
        return Redirect(url=f"/project.html?projectId={project.external_id}")

    def _can_edit(self, user: User, project: Project) -> bool:
        try:
            return self.core.is_permission_granted_for_project(
                user, project.project_id, Permission.EDIT_PROJECT
            )
        except AccessDeniedError:
            return False

    def get_role(self, invitation: JoinProjectInvitation) -> Optional[Role]:
        if invitation.role_id is None:
            return None
        return self.core.find_role_by_id(invitation.role_id)

    def get_group(self, invitation: JoinProjectInvitation) -> Optional[Group]:
        if invitation.group_key is None:
            return None
        return self.core.find_group(invitation.group_key)

    def describe(self, invitation: JoinProjectInvitation) -> str:
        role = self.get_role(invitation)
        group = self.get_group(invitation)
        return (
            f"'join {invitation.project.describe()}, "
            f"role: {role.describe() if role else ' <empty>'}, "
            f"group: {group.describe() if group else ' <empty>'}'"
        )
