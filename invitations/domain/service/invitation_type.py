"""Invitation type contract.

An invitation type is a stateless policy object: it builds invitations of
one kind from a submitted form, reads them back from stored records, decides
who may issue them and applies them when they are redeemed. One instance per
kind is registered in the InvitationTypeRegistry.
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from invitations.domain.model import Group, Invitation, Project, Role, User
from invitations.domain.value import (
    GroupKey,
    InvalidProperty,
    InvitationForm,
    Navigation,
    RoleId,
)
from invitations.domain.value.common import ValueObject

T = TypeVar("T", bound=Invitation)


class EditPropertiesView(ValueObject):
    """Prefill values for the create/edit invitation form."""

    view_path: str
    name: str
    roles: list[Role]
    groups: list[Group]
    multiuser: bool
    role_id: Optional[RoleId] = None
    group_key: Optional[GroupKey] = None
    welcome_text: str = ""


class InvitationType(ABC, Generic[T]):
    """Behaviour table for one kind of invitation."""

    @property
    @abstractmethod
    def id(self) -> str:
        """Stable machine id, unique across registered types."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Human readable label."""
        pass

    @property
    @abstractmethod
    def description_view_path(self) -> str:
        """Locator of the view describing this kind of invitation."""
        pass

    @abstractmethod
    def get_edit_properties_view(
        self, user: User, project: Project, invitation: Optional[T] = None
    ) -> EditPropertiesView:
        """Form prefill for creating a new invitation or editing invitation."""
        pass

    def validate(self, form: InvitationForm, project: Project) -> list[InvalidProperty]:
        """Validate a submitted form.

        Returns:
            The invalid properties; empty when the form is acceptable
        """
        errors = []
        if not form.name.strip():
            errors.append(
                InvalidProperty(property_name="name", message="Name must not be empty")
            )
        return errors

    @abstractmethod
    def create_new_invitation(
        self, user: User, form: InvitationForm, project: Project, token: str
    ) -> T:
        """Build an invitation from a validated form."""
        pass

    @abstractmethod
    def read_from(self, params: dict[str, str], project: Project) -> T:
        """Rebuild an invitation from its stored record (inverse of as_map)."""
        pass

    @abstractmethod
    def is_available_for(self, holder: User, project: Project) -> bool:
        """Whether holder may see and create this kind of invitation."""
        pass

    @abstractmethod
    def is_invitation_available_for(self, invitation: T, holder: User) -> bool:
        """Whether invitation may be used on behalf of holder."""
        pass

    @abstractmethod
    def accept(self, invitation: T, user: User) -> Navigation:
        """Apply the invitation to user and tell where to go next.

        Raises:
            InvitationException: If the invitation cannot be applied
        """
        pass

    def process_invitation_request(
        self, invitation: T, user: Optional[User]
    ) -> Navigation:
        """Where someone opening the invitation link goes first.

        Types with a landing view pass it to the invitation; without one the
        invitation sends everybody to registration.
        """
        return invitation.process_invitation_request(user)

    def describe(self, invitation: T) -> str:
        return invitation.describe()
