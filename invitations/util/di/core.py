"""Settings providers."""

from dishka import Scope, provide

from invitations.config import InvitationSettings, Settings
from invitations.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Loads settings once per container from the environment (and ``.env``)."""

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        return Settings()

    @provide(scope=Scope.APP)
    def provide_invitation_settings(self, settings: Settings) -> InvitationSettings:
        """Expose the invitation section so services need not see the rest."""
        return settings.invitations
