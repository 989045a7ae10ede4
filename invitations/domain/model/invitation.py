"""Invitation entities.

An invitation is a token-bearing capability: whoever presents the token can
join the invitation's project the way its type prescribes. Invitations are
immutable; consumption of single-use tokens is tracked by the repository,
not by the entity.
"""

from typing import Optional

from invitations.domain.error import ConstructionInvariantError
from invitations.domain.model.common import DomainModel
from invitations.domain.model.project import Project
from invitations.domain.model.user import User
from invitations.domain.value import GroupKey, Navigation, Redirect, RoleId, UserId, View

REGISTRATION_PAGE = "/registerUser.html"


def parse_flag(value: Optional[str]) -> bool:
    """Parse a stored boolean; anything but a case-insensitive "true" is False."""
    return value is not None and value.strip().lower() == "true"


class Invitation(DomainModel):
    """Base invitation.

    Business rules:
    - The token never changes and is never shared between invitations
    - is_reusable is exactly ``not multi``; the stored flag keeps its
      historical name and the consumption logic depends on that algebra
    - Serialized as a flat string-keyed record (see as_map)
    """

    token: str
    multi: bool
    type_id: str
    project: Project
    name: str = ""
    welcome_text: str = ""
    created_by_user_id: Optional[UserId] = None

    @property
    def is_reusable(self) -> bool:
        return not self.multi

    def as_map(self) -> dict[str, str]:
        """Serialize into the flat record stored by repositories."""
        result = {
            "token": self.token,
            "multi": "true" if self.multi else "false",
            "name": self.name,
            "welcomeText": self.welcome_text,
        }
        if self.created_by_user_id is not None:
            result["createdByUserId"] = str(self.created_by_user_id)
        return result

    @classmethod
    def base_fields_from(cls, params: dict[str, str]) -> dict:
        """Read the keys written by Invitation.as_map."""
        created_by = params.get("createdByUserId")
        return {
            "token": params["token"],
            "multi": parse_flag(params.get("multi")),
            "name": params.get("name", ""),
            "welcome_text": params.get("welcomeText", ""),
            "created_by_user_id": UserId(int(created_by)) if created_by else None,
        }

    def process_invitation_request(
        self, user: Optional[User], landing_page: Optional[str] = None
    ) -> Navigation:
        """Decide where a principal presenting the token goes first.

        Args:
            user: Signed-in principal, None for anonymous visitors
            landing_page: Landing view supplied by the invitation's type;
                kinds without one send everybody to registration
        """
        return Redirect(url=REGISTRATION_PAGE)

    def describe(self) -> str:
        return f"'{self.type_id} {self.project.describe()}'"


class JoinProjectInvitation(Invitation):
    """Invitation to join a project with a role, a group, or both."""

    role_id: Optional[RoleId] = None
    group_key: Optional[GroupKey] = None

    @classmethod
    def new(
        cls,
        *,
        inviter: User,
        name: str,
        token: str,
        project: Project,
        role_id: Optional[RoleId],
        group_key: Optional[GroupKey],
        multi: bool,
        welcome_text: Optional[str],
        type_id: str,
    ) -> "JoinProjectInvitation":
        """Build a fresh invitation.

        Raises:
            ConstructionInvariantError: If neither role nor group is given
        """
        if role_id is None and group_key is None:
            raise ConstructionInvariantError("Role or group must be specified")
        return cls(
            token=token,
            multi=multi,
            type_id=type_id,
            project=project,
            name=name,
            welcome_text=welcome_text or "",
            created_by_user_id=inviter.id,
            role_id=role_id,
            group_key=group_key,
        )

    @classmethod
    def from_map(
        cls,
        params: dict[str, str],
        project: Project,
        type_id: str,
    ) -> "JoinProjectInvitation":
        """Inverse of as_map.

        Stored records are read as-is; an empty role/group pair is caught
        when the invitation is redeemed.
        """
        role_id = params.get("roleId")
        group_key = params.get("groupKey")
        return cls(
            **cls.base_fields_from(params),
            type_id=type_id,
            project=project,
            role_id=RoleId(role_id) if role_id is not None else None,
            group_key=GroupKey(group_key) if group_key is not None else None,
        )

    def as_map(self) -> dict[str, str]:
        result = super().as_map()
        if self.role_id is not None:
            result["roleId"] = self.role_id
        if self.group_key is not None:
            result["groupKey"] = self.group_key
        return result

    def process_invitation_request(
        self, user: Optional[User], landing_page: Optional[str] = None
    ) -> Navigation:
        if user is None or landing_page is None:
            return super().process_invitation_request(user)
        return View(
            path=landing_page,
            model={
                "token": self.token,
                "name": self.name,
                "welcomeText": self.welcome_text,
                "project": self.project.full_name,
                "projectExternalId": self.project.external_id,
                "acceptUrl": f"/invitations/{self.token}/accept",
            },
        )
