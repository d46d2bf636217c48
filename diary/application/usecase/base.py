"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Base use case: one operation, one ``execute`` call.

    Use cases receive the resolved actor inside their request and delegate
    rules to domain services; they only shape the response.
    """

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
