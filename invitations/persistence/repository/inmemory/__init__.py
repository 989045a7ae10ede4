"""In-memory repository implementations for testing."""

from invitations.persistence.repository.inmemory.invitation import (
    InMemoryInvitationRepository,
)

__all__ = [
    "InMemoryInvitationRepository",
]
