"""Dependency injection module."""

from typing import Type

from invitations.util.di.application import ProdApplicationProvider
from invitations.util.di.base import Component, ProviderBase
from invitations.util.di.core import ProdConfigProvider
from invitations.util.di.domain import ProdDomainProvider
from invitations.util.di.infrastructure import (
    HostProvider,
    PersistenceProvider,
    ProdPersistenceProvider,
)
from invitations.util.error import DependencyInjectionError

# Providers instantiated without arguments; HostProvider is added by the
# container builders because it wraps the host's facade.
PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not mockable)
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Infrastructure components (mockable)
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Get appropriate provider class.

    - No subclasses: Concrete provider, use directly
    - Has subclasses: Mockable component, select by __is_mock__ flag

    Args:
        base: Provider base class
        use_mock: Whether to use mock implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        DependencyInjectionError: If requested implementation not found
    """
    subclasses = base.__subclasses__()

    if not subclasses:
        return base

    impl = next(
        (c for c in subclasses if getattr(c, "__is_mock__", False) == use_mock),
        None,
    )

    if not impl:
        kind = "mock" if use_mock else "production"
        component_name = getattr(base, "__mock_component__", base.__name__)
        raise DependencyInjectionError(
            f"No {kind} implementation for {component_name}"
        )

    return impl


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    # Core providers
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    # Infrastructure
    "HostProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
