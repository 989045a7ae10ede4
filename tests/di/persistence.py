"""Mock persistence providers for testing."""

from dishka import Scope, provide

from invitations.domain.repository import InvitationRepository
from invitations.persistence.repository.inmemory import InMemoryInvitationRepository
from invitations.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using an in-memory repository.

    APP scope so a token issued in one request is still there when a later
    request redeems it. Every test builds its own container, which keeps
    tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_invitation_repository(self) -> InvitationRepository:
        """Provide in-memory invitation repository."""
        return InMemoryInvitationRepository()
