"""Infrastructure providers.

``ProdPersistenceProvider`` is imported so that it is registered as a
subclass of ``PersistenceProvider`` before ``get_provider`` looks it up.
"""

from .host import HostProvider
from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = ["HostProvider", "PersistenceProvider", "ProdPersistenceProvider"]
