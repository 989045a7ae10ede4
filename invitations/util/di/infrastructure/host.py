"""Host platform provider."""

from dishka import Scope, provide

from invitations.domain.service import CoreFacade
from invitations.util.di.base import ProviderBase


class HostProvider(ProviderBase):
    """Provides the host platform facade.

    The host owns projects, roles, groups and users, so it hands its facade
    in when building the container instead of the container creating one.
    """

    def __init__(self, core: CoreFacade) -> None:
        super().__init__()
        self._core = core

    @provide(scope=Scope.APP)
    def get_core(self) -> CoreFacade:
        """Provide the host facade."""
        return self._core
