"""Role and group entities."""

from invitations.domain.model.common import DomainModel
from invitations.domain.value import GroupKey, Permission, RoleId


class Role(DomainModel):
    """Named set of permissions that can be assigned in a project."""

    id: RoleId
    name: str
    permissions: frozenset[Permission] = frozenset()
    project_association_supported: bool = True

    def describe(self) -> str:
        return f'"{self.name}" {{id={self.id}}}'


class Group(DomainModel):
    """User group; members inherit the roles granted to the group."""

    key: GroupKey
    name: str
    description: str = ""

    def describe(self) -> str:
        return f'"{self.name}" {{key={self.key}}}'
