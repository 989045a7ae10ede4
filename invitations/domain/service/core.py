"""Host platform facade.

Invitations do not own projects, roles, groups or users. Everything they
need from the hosting platform goes through CoreFacade, which is passed
explicitly into invitation types and services.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Optional

from invitations.domain.model import Group, Project, Role, User
from invitations.domain.value import GroupKey, Permission, ProjectId, RoleId, UserId


class CoreFacade(ABC):
    """Narrow interface to the host's registries and security context.

    Permission queries and mutations are evaluated with the authority of
    the ambient principal (see acting_as). run_as_system temporarily lifts
    that authority for the calls an invitation itself must be allowed to
    make.
    """

    # Registries

    @abstractmethod
    def find_project(self, project_id: ProjectId) -> Optional[Project]:
        """Resolve a project by its internal id."""
        pass

    @abstractmethod
    def find_role_by_id(self, role_id: RoleId) -> Optional[Role]:
        """Resolve a role by id."""
        pass

    @abstractmethod
    def find_group(self, group_key: GroupKey) -> Optional[Group]:
        """Resolve a group by key."""
        pass

    @abstractmethod
    def get_user(self, user_id: UserId) -> Optional[User]:
        """Resolve a user by id."""
        pass

    @abstractmethod
    def get_available_roles(self) -> list[Role]:
        """All roles defined on the host."""
        pass

    @abstractmethod
    def get_available_groups(self) -> list[Group]:
        """All groups defined on the host."""
        pass

    # Permission queries

    @abstractmethod
    def group_permissions_for_project(
        self, group: Group, project_id: ProjectId
    ) -> frozenset[Permission]:
        """Permissions members of the group get in the project."""
        pass

    @abstractmethod
    def is_permission_granted_for_project(
        self, holder: User, project_id: ProjectId, permission: Permission
    ) -> bool:
        """Whether holder has permission in the project.

        Raises:
            AccessDeniedError: If the ambient principal may not inspect
                the project
        """
        pass

    @abstractmethod
    def can_add_to_remove_from_group(self, holder: User, group: Group) -> bool:
        """Whether holder may change the membership of group."""
        pass

    # Mutations

    @abstractmethod
    def add_role(self, user: User, role: Role, project_id: ProjectId) -> None:
        """Assign role to user in the project. Idempotent.

        Raises:
            AccessDeniedError: If the ambient principal may not assign roles
        """
        pass

    @abstractmethod
    def assign_to_group(self, user: User, group: Group) -> None:
        """Add user to group. Idempotent.

        Raises:
            AccessDeniedError: If the ambient principal may not edit the group
        """
        pass

    # Security context

    @abstractmethod
    def acting_as(self, user: Optional[User]) -> AbstractContextManager[None]:
        """Run the enclosed block with user as the ambient principal."""
        pass

    @abstractmethod
    def run_as_system(self) -> AbstractContextManager[None]:
        """Run the enclosed block with system authority.

        The previous authority is restored on every exit path.
        """
        pass

    # Presentation

    @abstractmethod
    def plugin_resources_path(self, name: str) -> str:
        """Locator of a view resource shipped with invitations."""
        pass
