"""Exceptions raised by the assistant.

Input problems are not exceptions: the request builder returns a
ValidationFailure value and screens show its message inline.
"""

from typing import Optional


class MissingCredentialError(RuntimeError):
    """The Gemini API key is not configured. Fatal at startup."""


class GeminiAPIError(Exception):
    """The Gemini endpoint returned an error status or error payload."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class RemoteInvocationError(Exception):
    """A model call failed. Carries only the user-facing message."""
