"""Gemini adapter implementing the LLM port."""

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from google import genai

from ....core.domain.exceptions import (
    GenerationAPIError,
    GenerationBlockedError,
    GenerationError,
    GenerationRateLimitError,
    GenerationResponseError,
    GenerationTimeoutError,
)
from ....core.ports.llm_port import LLMPort
from ..gemini_common import create_client, is_rate_limit, is_timeout

logger = logging.getLogger(__name__)

# Finish reasons that mean the answer was withheld by a filter
BLOCKED_FINISH_REASONS = {"SAFETY", "RECITATION", "BLOCKLIST", "PROHIBITED_CONTENT", "SPII"}


class GeminiAdapter(LLMPort):
    """Client for Google Gemini text generation using the google-genai SDK."""

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.5-flash",
        temperature: float = 0.7,
        max_output_tokens: int = 2048,
        timeout_seconds: float | None = None,
        client: "genai.Client | None" = None,
    ) -> None:
        """Initialize the Gemini adapter.

        Args:
            api_key: Google AI API key.
            model: Generation model name.
            temperature: Sampling temperature (0.0-1.0).
            max_output_tokens: Maximum tokens to generate.
            timeout_seconds: Optional per-request timeout.
            client: Pre-built genai client (mainly for tests).
        """
        self.api_key = api_key
        self.model_name = model
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens
        self.timeout_seconds = timeout_seconds
        self._client = client

    def _get_client(self) -> "genai.Client":
        """Lazy load the genai client."""
        if self._client is None:
            self._client = create_client(self.api_key, self.timeout_seconds)
            logger.info("Gemini client initialized for model: %s", self.model_name)
        return self._client

    def _config(self) -> Any:
        from google.genai.types import GenerateContentConfig

        return GenerateContentConfig(
            temperature=self.temperature,
            max_output_tokens=self.max_output_tokens,
        )

    def _wrap_error(self, exc: Exception) -> GenerationError:
        context = {"model": self.model_name}
        if is_timeout(exc):
            return GenerationTimeoutError(
                f"Generation request timed out: {exc}", cause=exc, context=context
            )
        if is_rate_limit(exc):
            return GenerationRateLimitError(
                "Rate limit reached. Please wait a moment and try again.",
                cause=exc,
                context=context,
            )
        return GenerationAPIError(f"Generation request failed: {exc}", cause=exc, context=context)

    def _check_blocked(self, response: Any) -> None:
        feedback = getattr(response, "prompt_feedback", None)
        block_reason = getattr(feedback, "block_reason", None) if feedback else None
        if block_reason:
            raise GenerationBlockedError(
                "The question was blocked by the model's safety filters",
                context={"model": self.model_name, "block_reason": str(block_reason)},
            )

        candidates = getattr(response, "candidates", None)
        if not candidates:
            raise GenerationBlockedError(
                "The model returned no candidates for this question",
                context={"model": self.model_name},
            )

        finish_reason = getattr(candidates[0], "finish_reason", None)
        reason_name = getattr(finish_reason, "name", None) or str(finish_reason or "")
        if reason_name in BLOCKED_FINISH_REASONS:
            raise GenerationBlockedError(
                "The answer was withheld by the model's safety filters",
                context={"model": self.model_name, "finish_reason": reason_name},
            )

    def generate(self, prompt: str) -> str:
        client = self._get_client()

        try:
            response = client.models.generate_content(
                model=self.model_name,
                contents=prompt,
                config=self._config(),
            )
        except Exception as e:
            raise self._wrap_error(e) from e

        self._check_blocked(response)

        text = getattr(response, "text", None)
        if not isinstance(text, str) or not text.strip():
            raise GenerationResponseError(
                "The model returned an empty answer",
                context={"model": self.model_name},
            )
        return text

    def generate_stream(self, prompt: str) -> Iterator[str]:
        client = self._get_client()

        try:
            for chunk in client.models.generate_content_stream(
                model=self.model_name,
                contents=prompt,
                config=self._config(),
            ):
                text = getattr(chunk, "text", None)
                if text:
                    yield text
        except GenerationError:
            raise
        except Exception as e:
            raise self._wrap_error(e) from e
