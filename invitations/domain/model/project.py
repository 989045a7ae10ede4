"""Project entity as seen by invitations.

Projects live in the host platform; this is the read-only view invitations
need to address and describe the project they grant access to.
"""

from typing import Optional

from invitations.domain.model.common import DomainModel
from invitations.domain.value import ProjectId


class Project(DomainModel):
    """Project the invitation grants access to.

    project_id is the host's internal id used in permission checks,
    external_id is the id that appears in URLs.
    """

    project_id: ProjectId
    external_id: str
    name: str
    parent_full_name: Optional[str] = None

    @property
    def full_name(self) -> str:
        """Name including the parent project path."""
        if self.parent_full_name:
            return f"{self.parent_full_name} / {self.name}"
        return self.name

    def describe(self) -> str:
        return f'"{self.full_name}" {{id={self.external_id}}}'
