"""API Invoker - one remote call per request, failures collapsed to a generic message."""

import logging
from typing import Optional

from .errors import RemoteInvocationError
from .logger import RequestLogger
from .models import OperationKind, OperationRequest
from .providers import AIProvider

logger = logging.getLogger(__name__)

FAILURE_MESSAGES = {
    OperationKind.QUIZ: "Failed to get a response from the AI. Please check your API key and network connection.",
    OperationKind.CHAT: "Failed to get a chat response from the AI.",
    OperationKind.IMAGE: "Failed to analyze the image.",
    OperationKind.VIDEO: "Failed to analyze the video description.",
}


class ApiInvoker:
    """Sends built requests to a provider. No retry, no backoff, no caching."""

    def __init__(
        self,
        provider: AIProvider,
        mode: str = "prod",
        request_logger: Optional[RequestLogger] = None,
    ):
        self.provider = provider
        self.mode = mode
        self.request_logger = request_logger

    async def invoke(self, request: OperationRequest) -> str:
        """
        Run exactly one model call.

        Returns:
            The response text, possibly empty

        Raises:
            RemoteInvocationError: On any provider failure; the cause is
                logged but not carried in the message
        """
        log_id = None
        if self.request_logger:
            log_id = self.request_logger.log_request(
                operation=request.operation_kind.value,
                model=request.model_id,
                mode=self.mode,
                prompt_preview=request.prompt_text,
                image_count=len(request.attached_parts),
            )

        try:
            result = await self.provider.generate(request)
        except Exception as e:
            logger.exception(
                "Model call failed: operation=%s model=%s provider=%s",
                request.operation_kind.value, request.model_id, self.provider.PROVIDER_NAME,
            )
            if log_id:
                self.request_logger.log_response(log_id, success=False, error=str(e))
            raise RemoteInvocationError(FAILURE_MESSAGES[request.operation_kind]) from e

        if log_id:
            self.request_logger.log_response(log_id, success=True)

        logger.info(
            "Model call succeeded: operation=%s model=%s chars=%d",
            request.operation_kind.value, result.model, len(result.text),
        )
        return result.text
