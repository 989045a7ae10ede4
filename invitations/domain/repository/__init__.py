"""Repository interfaces for invitations.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from invitations.domain.repository.invitation import InvitationRepository

__all__ = [
    "InvitationRepository",
]
