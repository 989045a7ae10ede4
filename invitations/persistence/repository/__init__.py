"""Repository implementations."""

from invitations.persistence.repository.invitation import PostgresInvitationRepository

__all__ = [
    "PostgresInvitationRepository",
]
