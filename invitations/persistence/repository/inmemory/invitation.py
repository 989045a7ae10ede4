"""In-memory invitation repository for testing."""

import asyncio
from typing import Optional

from invitations.domain.model import InvitationRecord
from invitations.domain.repository.invitation import InvitationRepository
from invitations.domain.value import ProjectId


class InMemoryInvitationRepository(InvitationRepository):
    """In-memory implementation of InvitationRepository for testing."""

    def __init__(self) -> None:
        self._records: dict[str, InvitationRecord] = {}
        self._lock = asyncio.Lock()

    async def find_by_token(self, token: str) -> Optional[InvitationRecord]:
        """Find a record by its token."""
        return self._records.get(token)

    async def find_by_project(self, project_id: ProjectId) -> list[InvitationRecord]:
        """Find records of a project, newest first."""
        matches = [r for r in self._records.values() if r.project_id == project_id]
        matches.sort(key=lambda r: r.created_at, reverse=True)
        return matches

    async def save(self, record: InvitationRecord) -> InvitationRecord:
        """Save a record (create or replace by token)."""
        async with self._lock:
            self._records[record.token] = record
        return record

    async def delete(self, token: str) -> bool:
        """Delete a record by token."""
        async with self._lock:
            return self._records.pop(token, None) is not None

    async def take(self, token: str) -> Optional[InvitationRecord]:
        """Remove and return a record; concurrent callers get it at most once."""
        async with self._lock:
            return self._records.pop(token, None)
