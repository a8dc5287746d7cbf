"""Base class for AI providers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from ..models import OperationRequest


@dataclass
class GenerationResult:
    """Result from a generation request."""
    text: str
    model: str
    provider: str
    metadata: dict = field(default_factory=dict)


class AIProvider(ABC):
    """Abstract base class for AI providers."""

    PROVIDER_NAME: str = "base"

    @abstractmethod
    async def generate(self, request: OperationRequest) -> GenerationResult:
        """
        Run one model invocation.

        Args:
            request: Fully built operation descriptor

        Returns:
            GenerationResult with the response text (possibly empty)
        """
        pass

    @abstractmethod
    async def close(self):
        """Close any open connections."""
        pass
