"""PostgreSQL implementation of Invitation repository."""

from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from invitations.domain.model import InvitationRecord
from invitations.domain.repository import InvitationRepository
from invitations.domain.value import ProjectId
from invitations.persistence.mappers import record_to_dict, row_to_record
from invitations.persistence.tables import invitations_table


class PostgresInvitationRepository(InvitationRepository):
    """PostgreSQL implementation of InvitationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_token(self, token: str) -> Optional[InvitationRecord]:
        """Find an invitation record by its token.

        Args:
            token: Invitation token to look up

        Returns:
            Record if found, None otherwise
        """
        stmt = select(invitations_table).where(invitations_table.c.token == token)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_record(dict(row)) if row else None

    async def find_by_project(self, project_id: ProjectId) -> list[InvitationRecord]:
        """Find invitation records of a project, newest first."""
        stmt = (
            select(invitations_table)
            .where(invitations_table.c.project_id == project_id)
            .order_by(invitations_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_record(dict(row)) for row in result.mappings().all()]

    async def save(self, record: InvitationRecord) -> InvitationRecord:
        """Insert a record or replace the one with the same token.

        Args:
            record: Record to save

        Returns:
            Saved record
        """
        values = record_to_dict(record)
        stmt = insert(invitations_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[invitations_table.c.token],
            set_={
                "type_id": stmt.excluded.type_id,
                "project_id": stmt.excluded.project_id,
                "params": stmt.excluded.params,
                "created_at": stmt.excluded.created_at,
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return record

    async def delete(self, token: str) -> bool:
        """Delete a record by token.

        Returns:
            True if a row was deleted
        """
        stmt = (
            delete(invitations_table)
            .where(invitations_table.c.token == token)
            .returning(invitations_table.c.token)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.first() is not None

    async def take(self, token: str) -> Optional[InvitationRecord]:
        """Delete a record and return it in one statement.

        DELETE ... RETURNING takes a row lock, so of two concurrent
        transactions only one gets the row back; the other sees nothing
        once the first commits.
        """
        stmt = (
            delete(invitations_table)
            .where(invitations_table.c.token == token)
            .returning(*invitations_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_record(dict(row)) if row else None
