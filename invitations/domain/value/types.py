"""Domain value objects for invitations.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import Field

from invitations.domain.value.common import ValueObject
from invitations.domain.value.identifiers import GroupKey, RoleId


class Permission(str, Enum):
    """Host permissions consulted by invitations."""

    VIEW_PROJECT = "view_project"
    RUN_BUILD = "run_build"
    EDIT_PROJECT = "edit_project"
    CHANGE_USER_ROLES_IN_PROJECT = "change_user_roles_in_project"
    CHANGE_USER = "change_user"


class InvalidProperty(ValueObject):
    """A single validation failure bound to a form field."""

    property_name: str
    message: str


class InvitationForm(ValueObject):
    """Raw values submitted by the create/edit invitation form.

    Field values are kept as submitted; blank strings mean "not specified".
    """

    name: str = ""
    role: str = ""
    group: str = ""
    multiuser: bool = False
    welcome_text: str = ""

    @property
    def role_id(self) -> Optional[RoleId]:
        """Submitted role id, or None when blank."""
        return RoleId(self.role) if self.role.strip() else None

    @property
    def group_key(self) -> Optional[GroupKey]:
        """Submitted group key, or None when blank."""
        return GroupKey(self.group) if self.group.strip() else None


class Redirect(ValueObject):
    """Navigation result that sends the browser elsewhere."""

    url: str


class View(ValueObject):
    """Navigation result rendered by the host presentation layer."""

    path: str
    model: dict[str, Any] = Field(default_factory=dict)


Navigation = Redirect | View
