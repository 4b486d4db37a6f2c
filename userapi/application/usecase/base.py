"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services.

    A use case turns a request model into domain calls and returns a
    response model that is safe to hand to the transport layer.
    """

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
