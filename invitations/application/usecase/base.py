"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Base use case orchestrating the invitation service and the host.

    Use cases take plain request models (ids and raw form values), resolve
    host entities and run the domain service as the requesting user.
    """

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
