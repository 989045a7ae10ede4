"""Application layer DI providers."""

from dishka import Scope, provide

from invitations.application.usecase.invitation import (
    AcceptInvitationUseCase,
    CreateInvitationUseCase,
    GetEditPropertiesUseCase,
    GetInvitationsUseCase,
    ProcessInvitationUseCase,
    RevokeInvitationUseCase,
    UpdateInvitationUseCase,
)
from invitations.config import Settings
from invitations.domain.service import CoreFacade, InvitationService
from invitations.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Issuing
    @provide(scope=Scope.REQUEST)
    def get_create_invitation_use_case(
        self,
        invitation_service: InvitationService,
        core: CoreFacade,
        settings: Settings,
    ) -> CreateInvitationUseCase:
        """Provide create invitation use case."""
        return CreateInvitationUseCase(
            invitation_service=invitation_service, core=core, settings=settings
        )

    @provide(scope=Scope.REQUEST)
    def get_update_invitation_use_case(
        self,
        invitation_service: InvitationService,
        core: CoreFacade,
        settings: Settings,
    ) -> UpdateInvitationUseCase:
        """Provide update invitation use case."""
        return UpdateInvitationUseCase(
            invitation_service=invitation_service, core=core, settings=settings
        )

    @provide(scope=Scope.REQUEST)
    def get_get_invitations_use_case(
        self,
        invitation_service: InvitationService,
        core: CoreFacade,
        settings: Settings,
    ) -> GetInvitationsUseCase:
        """Provide get invitations use case."""
        return GetInvitationsUseCase(
            invitation_service=invitation_service, core=core, settings=settings
        )

    @provide(scope=Scope.REQUEST)
    def get_get_edit_properties_use_case(
        self, invitation_service: InvitationService, core: CoreFacade
    ) -> GetEditPropertiesUseCase:
        """Provide get edit properties use case."""
        return GetEditPropertiesUseCase(
            invitation_service=invitation_service, core=core
        )

    @provide(scope=Scope.REQUEST)
    def get_revoke_invitation_use_case(
        self, invitation_service: InvitationService, core: CoreFacade
    ) -> RevokeInvitationUseCase:
        """Provide revoke invitation use case."""
        return RevokeInvitationUseCase(invitation_service=invitation_service, core=core)

    # Redemption
    @provide(scope=Scope.REQUEST)
    def get_process_invitation_use_case(
        self, invitation_service: InvitationService, core: CoreFacade
    ) -> ProcessInvitationUseCase:
        """Provide process invitation use case."""
        return ProcessInvitationUseCase(
            invitation_service=invitation_service, core=core
        )

    @provide(scope=Scope.REQUEST)
    def get_accept_invitation_use_case(
        self, invitation_service: InvitationService, core: CoreFacade
    ) -> AcceptInvitationUseCase:
        """Provide accept invitation use case."""
        return AcceptInvitationUseCase(invitation_service=invitation_service, core=core)
