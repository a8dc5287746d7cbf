"""Google Gemini provider implementation."""

import httpx
from typing import Optional

from ..config import DEFAULT_BASE_URL
from ..errors import GeminiAPIError
from ..models import OperationRequest
from .base import AIProvider, GenerationResult


class GoogleProvider(AIProvider):
    """Provider for Google's Gemini models over the REST API."""

    PROVIDER_NAME = "google"

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the provider.

        Args:
            api_key: Gemini API key
            base_url: Model endpoint base (".../v1beta/models")
            timeout: Client timeout in seconds; None waits indefinitely
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def generate(self, request: OperationRequest) -> GenerationResult:
        """Send one generateContent call for the request."""
        if not self.api_key:
            raise GeminiAPIError("GEMINI_API_KEY not configured")

        url = f"{self.base_url}/{request.model_id}:generateContent"

        response = await self._client.post(
            url,
            params={"key": self.api_key},
            json=self.build_request_body(request),
            headers={"Content-Type": "application/json"},
        )

        text = self._parse_response(response)
        return GenerationResult(
            text=text,
            model=request.model_id,
            provider=self.PROVIDER_NAME,
        )

    @staticmethod
    def build_request_body(request: OperationRequest) -> dict:
        """Build the Gemini API request body."""
        # Images first, then text
        parts = []
        for image in request.attached_parts:
            parts.append({
                "inline_data": {
                    "mime_type": image.mime_type,
                    "data": image.data,
                }
            })
        parts.append({"text": request.prompt_text})

        body = {
            "contents": [{"parts": parts}]
        }

        if request.tools_enabled:
            body["tools"] = [{"google_search": {}}]

        if request.extended_reasoning_budget is not None:
            body["generationConfig"] = {
                "thinkingConfig": {"thinkingBudget": request.extended_reasoning_budget}
            }

        return body

    def _parse_response(self, response: httpx.Response) -> str:
        """
        Extract the response text.

        All text parts of the first candidate are joined. A response with no
        candidates or no text yields an empty string.
        """
        if response.status_code != 200:
            message = f"Gemini API returned HTTP {response.status_code}"
            try:
                error_data = response.json()
            except ValueError:
                error_data = None
            if isinstance(error_data, dict) and isinstance(error_data.get("error"), dict):
                message = f"Gemini API error: {error_data['error'].get('message', 'Unknown error')}"
            raise GeminiAPIError(message, status_code=response.status_code)

        data = response.json()

        if "error" in data:
            raise GeminiAPIError(
                f"Gemini API error: {data['error'].get('message', 'Unknown error')}",
                status_code=response.status_code,
            )

        candidates = data.get("candidates") or []
        if not candidates:
            return ""

        parts = (candidates[0].get("content") or {}).get("parts") or []
        return "".join(
            part["text"] for part in parts
            if isinstance(part.get("text"), str) and not part.get("thought")
        )

    async def close(self):
        """Close the HTTP client."""
        await self._client.aclose()
