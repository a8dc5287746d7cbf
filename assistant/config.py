"""Process configuration, read once from the environment at startup."""

import os
from dataclasses import dataclass
from typing import Optional

from .errors import MissingCredentialError

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"
DEFAULT_REQUEST_LOG_SIZE = 1000


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the assistant server."""
    gemini_api_key: str
    gemini_base_url: str = DEFAULT_BASE_URL
    # None disables the HTTP client timeout
    timeout_seconds: Optional[float] = None
    request_log_size: int = DEFAULT_REQUEST_LOG_SIZE


def load_settings() -> Settings:
    """
    Build Settings from environment variables.

    Raises:
        MissingCredentialError: If GEMINI_API_KEY is unset or blank
        ValueError: If a numeric variable cannot be parsed
    """
    api_key = (os.getenv("GEMINI_API_KEY") or "").strip()
    if not api_key:
        raise MissingCredentialError(
            "GEMINI_API_KEY environment variable not set. "
            "Export a Gemini API key before starting the server."
        )

    timeout_raw = os.getenv("GEMINI_TIMEOUT_SECONDS")
    timeout = float(timeout_raw) if timeout_raw else None

    log_size_raw = os.getenv("REQUEST_LOG_SIZE")
    log_size = int(log_size_raw) if log_size_raw else DEFAULT_REQUEST_LOG_SIZE

    return Settings(
        gemini_api_key=api_key,
        gemini_base_url=os.getenv("GEMINI_BASE_URL") or DEFAULT_BASE_URL,
        timeout_seconds=timeout,
        request_log_size=log_size,
    )
