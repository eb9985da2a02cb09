"""Shared helpers for the Gemini adapters (google-genai SDK)."""

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from google import genai

from ...core.domain.exceptions import MissingAPIKeyError

logger = logging.getLogger(__name__)


def create_client(api_key: str, timeout_seconds: float | None = None) -> "genai.Client":
    """Create a google-genai client.

    Args:
        api_key: Google AI API key.
        timeout_seconds: Optional per-request timeout.

    Raises:
        MissingAPIKeyError: If no API key is configured.
    """
    if not api_key:
        raise MissingAPIKeyError(
            "Google API key not set. Get one at https://aistudio.google.com/ "
            "and set GOOGLE_API_KEY in your .env file."
        )

    from google import genai
    from google.genai import types

    http_options = None
    if timeout_seconds:
        # The SDK expects milliseconds
        http_options = types.HttpOptions(timeout=int(timeout_seconds * 1000))

    return genai.Client(api_key=api_key, http_options=http_options)


def is_rate_limit(exc: Exception) -> bool:
    """True if the SDK error reports an exhausted quota."""
    from google.genai import errors

    if isinstance(exc, errors.APIError):
        return exc.code == 429
    message = str(exc).lower()
    return "quota" in message or "rate limit" in message


def is_timeout(exc: Exception) -> bool:
    """True if the error is a request timeout."""
    import httpx

    return isinstance(exc, TimeoutError | httpx.TimeoutException)
