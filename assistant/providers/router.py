"""Provider router - picks the Gemini or mock provider for a request mode."""

from typing import Optional

from ..config import Settings
from .base import AIProvider
from .google import GoogleProvider
from .mock import MockProvider

MODES = ("mock", "prod")


class ProviderRouter:
    """Routes requests to the Gemini provider or an offline mock."""

    def __init__(self, settings: Settings, transport=None):
        """
        Initialize the router.

        Args:
            settings: Loaded process settings (API key, endpoint, timeout)
            transport: Optional httpx transport forwarded to GoogleProvider
        """
        self.settings = settings
        self._transport = transport

        # Cache of long-lived provider instances
        self._providers: dict[str, AIProvider] = {}

    def get_provider(
        self,
        mode: str = "prod",
        scenario: Optional[str] = None,
        error: Optional[str] = None,
        delay_ms: int = 0,
    ) -> AIProvider:
        """
        Get the provider for a request mode.

        Mock providers are cheap and carry per-request scenario, error and
        delay settings, so a new one is returned each call.

        Raises:
            ValueError: If the mode is not recognized
        """
        if mode not in MODES:
            raise ValueError(f"Unknown mode: {mode}. Available modes: {list(MODES)}")

        if mode == "mock":
            return MockProvider(scenario=scenario, error=error, delay_ms=delay_ms)

        if GoogleProvider.PROVIDER_NAME not in self._providers:
            self._providers[GoogleProvider.PROVIDER_NAME] = GoogleProvider(
                api_key=self.settings.gemini_api_key,
                base_url=self.settings.gemini_base_url,
                timeout=self.settings.timeout_seconds,
                transport=self._transport,
            )

        return self._providers[GoogleProvider.PROVIDER_NAME]

    async def close_all(self):
        """Close all provider connections."""
        for provider in self._providers.values():
            await provider.close()
        self._providers.clear()
