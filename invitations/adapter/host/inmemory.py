"""In-memory host platform.

A self-contained CoreFacade used when invitations run without a hosting
platform and as the host fake in tests. Permission rules:

- a user's permissions in a project are the union of their own roles in
  the project, the roles of their groups in the project and their global
  permissions
- permission queries require the ambient principal to see the project
  (VIEW_PROJECT) unless running as system
- role and group mutations require the ambient principal to hold the
  matching rights unless running as system
"""

from collections import defaultdict
from contextlib import AbstractContextManager
from typing import Iterable, Optional

from invitations.domain.error import AccessDeniedError
from invitations.domain.model import Group, Project, Role, User
from invitations.domain.service.core import CoreFacade
from invitations.domain.value import GroupKey, Permission, ProjectId, RoleId, UserId

from .security import SecurityContext


class InMemoryCoreFacade(CoreFacade):
    """Dictionary backed host registries with an ambient security context."""

    def __init__(
        self,
        security: SecurityContext | None = None,
        resources_path: str = "/plugins/invitations/",
    ) -> None:
        self.security = security or SecurityContext()
        self.resources_path = resources_path
        self._projects: dict[ProjectId, Project] = {}
        self._roles: dict[RoleId, Role] = {}
        self._groups: dict[GroupKey, Group] = {}
        self._users: dict[UserId, User] = {}
        self._user_roles: dict[UserId, set[tuple[ProjectId, RoleId]]] = defaultdict(set)
        self._group_roles: dict[GroupKey, set[tuple[ProjectId, RoleId]]] = (
            defaultdict(set)
        )
        self._group_members: dict[GroupKey, set[UserId]] = defaultdict(set)
        self._global_permissions: dict[UserId, frozenset[Permission]] = {}

    # Seeding

    def add_project(self, project: Project) -> Project:
        self._projects[project.project_id] = project
        return project

    def define_role(self, role: Role) -> Role:
        self._roles[role.id] = role
        return role

    def define_group(
        self, group: Group, project_roles: Optional[dict[ProjectId, RoleId]] = None
    ) -> Group:
        self._groups[group.key] = group
        for project_id, role_id in (project_roles or {}).items():
            self._group_roles[group.key].add((project_id, role_id))
        return group

    def add_user(
        self, user: User, global_permissions: Iterable[Permission] = ()
    ) -> User:
        self._users[user.id] = user
        self._global_permissions[user.id] = frozenset(global_permissions)
        return user

    def grant_role(self, user_id: UserId, role_id: RoleId, project_id: ProjectId) -> None:
        """Assign a role without any authority check."""
        self._user_roles[user_id].add((project_id, role_id))

    def remove_user(self, user_id: UserId) -> None:
        self._users.pop(user_id, None)

    def delete_role(self, role_id: RoleId) -> None:
        self._roles.pop(role_id, None)

    def delete_group(self, group_key: GroupKey) -> None:
        self._groups.pop(group_key, None)

    # Inspection

    def roles_of(self, user_id: UserId, project_id: ProjectId) -> set[RoleId]:
        return {r for p, r in self._user_roles[user_id] if p == project_id}

    def members_of(self, group_key: GroupKey) -> set[UserId]:
        return set(self._group_members[group_key])

    def permissions_of(self, user: User, project_id: ProjectId) -> frozenset[Permission]:
        permissions = set(self._global_permissions.get(user.id, frozenset()))
        for p, role_id in self._user_roles[user.id]:
            if p == project_id and role_id in self._roles:
                permissions |= self._roles[role_id].permissions
        for group_key, members in self._group_members.items():
            if user.id in members and group_key in self._groups:
                permissions |= self.group_permissions_for_project(
                    self._groups[group_key], project_id
                )
        return frozenset(permissions)

    # CoreFacade

    def find_project(self, project_id: ProjectId) -> Optional[Project]:
        return self._projects.get(project_id)

    def find_role_by_id(self, role_id: RoleId) -> Optional[Role]:
        return self._roles.get(role_id)

    def find_group(self, group_key: GroupKey) -> Optional[Group]:
        return self._groups.get(group_key)

    def get_user(self, user_id: UserId) -> Optional[User]:
        return self._users.get(user_id)

    def get_available_roles(self) -> list[Role]:
        return list(self._roles.values())

    def get_available_groups(self) -> list[Group]:
        return list(self._groups.values())

    def group_permissions_for_project(
        self, group: Group, project_id: ProjectId
    ) -> frozenset[Permission]:
        permissions: set[Permission] = set()
        for p, role_id in self._group_roles[group.key]:
            if p == project_id and role_id in self._roles:
                permissions |= self._roles[role_id].permissions
        return frozenset(permissions)

    def is_permission_granted_for_project(
        self, holder: User, project_id: ProjectId, permission: Permission
    ) -> bool:
        self._check_can_view(project_id)
        return permission in self.permissions_of(holder, project_id)

    def can_add_to_remove_from_group(self, holder: User, group: Group) -> bool:
        if Permission.CHANGE_USER in self._global_permissions.get(holder.id, ()):
            return True
        projects = {p for p, _ in self._group_roles[group.key]}
        if not projects:
            return False
        return all(
            Permission.CHANGE_USER_ROLES_IN_PROJECT in self.permissions_of(holder, p)
            for p in projects
        )

    def add_role(self, user: User, role: Role, project_id: ProjectId) -> None:
        if not self.security.is_system:
            actor = self.security.current_user
            if actor is None or (
                Permission.CHANGE_USER_ROLES_IN_PROJECT
                not in self.permissions_of(actor, project_id)
            ):
                raise AccessDeniedError(
                    f"Not allowed to assign role {role.id} in {project_id}"
                )
        self._user_roles[user.id].add((project_id, role.id))

    def assign_to_group(self, user: User, group: Group) -> None:
        if not self.security.is_system:
            actor = self.security.current_user
            if actor is None or not self.can_add_to_remove_from_group(actor, group):
                raise AccessDeniedError(f"Not allowed to edit group {group.key}")
        self._group_members[group.key].add(user.id)

    def acting_as(self, user: Optional[User]) -> AbstractContextManager[None]:
        return self.security.acting_as(user)

    def run_as_system(self) -> AbstractContextManager[None]:
        return self.security.run_as_system()

    def plugin_resources_path(self, name: str) -> str:
        return f"{self.resources_path}{name}"

    def _check_can_view(self, project_id: ProjectId) -> None:
        if self.security.is_system:
            return
        actor = self.security.current_user
        if actor is None or Permission.VIEW_PROJECT not in self.permissions_of(
            actor, project_id
        ):
            raise AccessDeniedError(f"Project {project_id} is not visible")
