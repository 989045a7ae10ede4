"""Domain layer DI providers."""

from dishka import Scope, provide

from invitations.config import InvitationSettings
from invitations.domain.repository import InvitationRepository
from invitations.domain.service import (
    CoreFacade,
    InvitationService,
    InvitationTypeRegistry,
    JoinProjectInvitationType,
)
from invitations.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Invitation types and their registry are stateless and APP-scoped. The
    invitation service is REQUEST-scoped to align with the repository's
    session lifecycle.
    """

    @provide(scope=Scope.APP)
    def get_join_project_invitation_type(
        self, core: CoreFacade
    ) -> JoinProjectInvitationType:
        """Provide the join-project invitation type."""
        return JoinProjectInvitationType(core=core)

    @provide(scope=Scope.APP)
    def get_invitation_type_registry(
        self, join_project: JoinProjectInvitationType
    ) -> InvitationTypeRegistry:
        """Provide the registry of all invitation types."""
        return InvitationTypeRegistry([join_project])

    @provide(scope=Scope.REQUEST)
    def get_invitation_service(
        self,
        invitation_repository: InvitationRepository,
        registry: InvitationTypeRegistry,
        core: CoreFacade,
        invitation_settings: InvitationSettings,
    ) -> InvitationService:
        """Provide invitation domain service."""
        return InvitationService(
            invitation_repository=invitation_repository,
            registry=registry,
            core=core,
            token_bytes=invitation_settings.token_bytes,
            default_redirect=invitation_settings.default_redirect,
        )
