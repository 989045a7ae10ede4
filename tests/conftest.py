"""Test configuration and host seeding helpers."""

from dataclasses import dataclass

import logfire

from invitations.adapter.host import InMemoryCoreFacade
from invitations.domain.model import Group, Project, Role, User
from invitations.domain.value import (
    GroupKey,
    InvitationForm,
    Permission,
    ProjectId,
    RoleId,
    UserId,
)

# Keep telemetry local while testing
logfire.configure(send_to_logfire=False, console=False)

ADMIN_PERMISSIONS = frozenset(
    {
        Permission.VIEW_PROJECT,
        Permission.RUN_BUILD,
        Permission.EDIT_PROJECT,
        Permission.CHANGE_USER_ROLES_IN_PROJECT,
    }
)
DEVELOPER_PERMISSIONS = frozenset({Permission.VIEW_PROJECT, Permission.RUN_BUILD})
VIEWER_PERMISSIONS = frozenset({Permission.VIEW_PROJECT})


@dataclass
class SeededHost:
    """Handles to everything seed_host put into the in-memory host."""

    core: InMemoryCoreFacade
    project: Project
    other_project: Project
    admin_role: Role
    developer_role: Role
    viewer_role: Role
    developers: Group
    admin: User
    newcomer: User
    outsider: User


def seed_host(core: InMemoryCoreFacade) -> SeededHost:
    """Populate an in-memory host with a project and its people.

    - admin administers "Backend" and may edit the "developers" group
    - newcomer and outsider exist but hold no roles anywhere
    - "developers" grants the developer role in "Backend"
    """
    project = core.add_project(
        Project(
            project_id=ProjectId("project1"),
            external_id="Platform_Backend",
            name="Backend",
            parent_full_name="Platform",
        )
    )
    other_project = core.add_project(
        Project(project_id=ProjectId("project2"), external_id="Docs", name="Docs")
    )

    admin_role = core.define_role(
        Role(
            id=RoleId("PROJECT_ADMIN"),
            name="Project administrator",
            permissions=ADMIN_PERMISSIONS,
        )
    )
    developer_role = core.define_role(
        Role(
            id=RoleId("PROJECT_DEVELOPER"),
            name="Project developer",
            permissions=DEVELOPER_PERMISSIONS,
        )
    )
    viewer_role = core.define_role(
        Role(
            id=RoleId("PROJECT_VIEWER"),
            name="Project viewer",
            permissions=VIEWER_PERMISSIONS,
        )
    )
    developers = core.define_group(
        Group(key=GroupKey("DEVELOPERS"), name="Developers"),
        project_roles={project.project_id: developer_role.id},
    )

    admin = core.add_user(User(id=UserId(1), username="admin", name="Ada Admin"))
    newcomer = core.add_user(User(id=UserId(2), username="newcomer"))
    outsider = core.add_user(User(id=UserId(3), username="outsider"))
    core.grant_role(admin.id, admin_role.id, project.project_id)

    return SeededHost(
        core=core,
        project=project,
        other_project=other_project,
        admin_role=admin_role,
        developer_role=developer_role,
        viewer_role=viewer_role,
        developers=developers,
        admin=admin,
        newcomer=newcomer,
        outsider=outsider,
    )


def join_form(
    role: str = "PROJECT_DEVELOPER",
    group: str = "",
    multiuser: bool = False,
    name: str = "Join Backend",
    welcome_text: str = "Welcome aboard",
) -> InvitationForm:
    """Create/edit form as a browser would submit it."""
    return InvitationForm(
        name=name,
        role=role,
        group=group,
        multiuser=multiuser,
        welcome_text=welcome_text,
    )
