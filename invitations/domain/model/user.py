"""User entity."""

from typing import Optional

from invitations.domain.model.common import DomainModel
from invitations.domain.value import UserId


class User(DomainModel):
    """Principal that issues or redeems invitations."""

    id: UserId
    username: str
    name: Optional[str] = None
    email: Optional[str] = None

    @property
    def descriptive_name(self) -> str:
        """Display name, falling back to the username."""
        return self.name or self.username

    def describe(self) -> str:
        return f'"{self.username}" {{id={self.id}}}'
