"""Offline provider serving canned responses."""

import asyncio
from typing import Optional

from ..errors import GeminiAPIError
from ..mock_responses import MOCK_ERRORS, get_mock_response
from ..models import OperationRequest
from .base import AIProvider, GenerationResult


class MockProvider(AIProvider):
    """Provider used for mode=mock requests."""

    PROVIDER_NAME = "mock"

    def __init__(
        self,
        scenario: Optional[str] = None,
        error: Optional[str] = None,
        delay_ms: int = 0,
    ):
        self.scenario = scenario
        self.error = error
        self.delay_ms = delay_ms

    async def generate(self, request: OperationRequest) -> GenerationResult:
        """Return the canned response, or raise the simulated error."""
        if self.delay_ms:
            await asyncio.sleep(self.delay_ms / 1000)

        if self.error:
            status_code, message = MOCK_ERRORS[self.error]
            raise GeminiAPIError(message, status_code=status_code)

        return GenerationResult(
            text=get_mock_response(request.operation_kind, self.scenario),
            model=request.model_id,
            provider=self.PROVIDER_NAME,
            metadata={"scenario": self.scenario} if self.scenario else {},
        )

    async def close(self):
        pass
