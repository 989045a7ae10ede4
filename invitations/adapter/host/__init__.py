"""In-process host platform."""

from .inmemory import InMemoryCoreFacade
from .security import SYSTEM, SecurityContext

__all__ = [
    "InMemoryCoreFacade",
    "SYSTEM",
    "SecurityContext",
]
