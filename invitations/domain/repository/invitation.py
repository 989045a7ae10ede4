"""Invitation repository interface."""

from abc import ABC, abstractmethod

from invitations.domain.model import InvitationRecord
from invitations.domain.value import ProjectId


class InvitationRepository(ABC):
    """Repository for stored invitation records.

    Defines the contract for invitation persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_token(self, token: str) -> InvitationRecord | None:
        """Find a stored invitation by token.

        Used when a user opens an invitation link.

        Args:
            token: The invitation token

        Returns:
            The record if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_project(self, project_id: ProjectId) -> list[InvitationRecord]:
        """Find all invitations of a project, newest first.

        Args:
            project_id: The host project id

        Returns:
            List of records
        """
        pass

    @abstractmethod
    async def save(self, record: InvitationRecord) -> InvitationRecord:
        """Save a record (create or replace by token).

        Args:
            record: The record to save

        Returns:
            The saved record
        """
        pass

    @abstractmethod
    async def delete(self, token: str) -> bool:
        """Delete a record (explicit revocation).

        Args:
            token: The invitation token

        Returns:
            True if a record was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def take(self, token: str) -> InvitationRecord | None:
        """Atomically remove and return a record.

        This is the check-and-invalidate primitive for single-use tokens:
        of any number of concurrent callers for the same token, at most one
        receives the record, the others receive None.

        Args:
            token: The invitation token

        Returns:
            The removed record, or None if it was already gone
        """
        pass
