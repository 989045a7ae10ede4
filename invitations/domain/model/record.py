"""Stored invitation record.

The durable representation of an invitation. Repositories only deal with
records; turning a record back into an Invitation requires the matching
InvitationType from the registry.
"""

from datetime import datetime, timezone

from pydantic import Field

from invitations.domain.model.common import DomainModel
from invitations.domain.model.invitation import Invitation
from invitations.domain.value import ProjectId


class InvitationRecord(DomainModel):
    """Flat, string-keyed invitation record keyed by token."""

    token: str
    type_id: str
    project_id: ProjectId
    params: dict[str, str]
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def of(cls, invitation: Invitation) -> "InvitationRecord":
        """Snapshot an invitation into its stored form."""
        return cls(
            token=invitation.token,
            type_id=invitation.type_id,
            project_id=invitation.project.project_id,
            params=invitation.as_map(),
        )
