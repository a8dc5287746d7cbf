"""AI provider abstraction layer for Gemini models."""

from .base import AIProvider, GenerationResult
from .router import ProviderRouter, MODES
from .google import GoogleProvider
from .mock import MockProvider

__all__ = [
    "AIProvider",
    "GenerationResult",
    "ProviderRouter",
    "MODES",
    "GoogleProvider",
    "MockProvider",
]
