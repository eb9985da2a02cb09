"""Gemini embedding adapter implementing the embedding port."""

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from google import genai

from ....core.domain.exceptions import (
    EmbeddingAPIError,
    EmbeddingDimensionError,
    EmbeddingRateLimitError,
    EmbeddingResponseError,
    InvalidInputError,
)
from ....core.ports.embedding_port import EmbeddingPort
from ..gemini_common import create_client, is_rate_limit

logger = logging.getLogger(__name__)

QUERY_TASK_TYPE = "RETRIEVAL_QUERY"


class GeminiEmbeddingAdapter(EmbeddingPort):
    """Embeds queries with a Gemini embedding model.

    Every vector must have the same length as the index it is searched
    against. With ``dimension=None`` the first vector returned fixes the
    dimension for the lifetime of the adapter.
    """

    def __init__(
        self,
        api_key: str,
        model_name: str = "text-embedding-004",
        dimension: int | None = 768,
        timeout_seconds: float | None = None,
        client: "genai.Client | None" = None,
    ) -> None:
        """Initialize the adapter.

        Args:
            api_key: Google AI API key.
            model_name: Embedding model name.
            dimension: Expected vector length, or None to learn it.
            timeout_seconds: Optional per-request timeout.
            client: Pre-built genai client (mainly for tests).
        """
        self.api_key = api_key
        self.model_name = model_name
        self.dimension = dimension
        self.timeout_seconds = timeout_seconds
        self._client = client

    def _get_client(self) -> "genai.Client":
        """Lazy load the genai client."""
        if self._client is None:
            self._client = create_client(self.api_key, self.timeout_seconds)
            logger.info("Gemini embedding client initialized for model: %s", self.model_name)
        return self._client

    def embed(self, text: str) -> list[float]:
        if not text or not text.strip():
            raise InvalidInputError("Cannot embed empty text")

        from google.genai import types

        client = self._get_client()

        try:
            result = client.models.embed_content(
                model=self.model_name,
                contents=text,
                config=types.EmbedContentConfig(task_type=QUERY_TASK_TYPE),
            )
        except Exception as e:
            error_cls = EmbeddingRateLimitError if is_rate_limit(e) else EmbeddingAPIError
            raise error_cls(
                f"Embedding request failed: {e}",
                cause=e,
                context={"model": self.model_name},
            ) from e

        return self._validate(self._extract_values(result))

    def _extract_values(self, result: Any) -> list[float]:
        embeddings = getattr(result, "embeddings", None)
        if not embeddings:
            raise EmbeddingResponseError(
                "Embedding response contained no embeddings",
                context={"model": self.model_name},
            )

        values = getattr(embeddings[0], "values", None)
        if not values:
            raise EmbeddingResponseError(
                "Embedding response contained an empty vector",
                context={"model": self.model_name},
            )

        try:
            return [float(v) for v in values]
        except (TypeError, ValueError) as e:
            raise EmbeddingResponseError(
                "Embedding response contained non-numeric values",
                cause=e,
                context={"model": self.model_name},
            ) from e

    def _validate(self, vector: list[float]) -> list[float]:
        if self.dimension is None:
            self.dimension = len(vector)
            logger.info("Embedding dimension set to %d", self.dimension)
        elif len(vector) != self.dimension:
            raise EmbeddingDimensionError(
                f"Expected a {self.dimension}-dimensional embedding, got {len(vector)}",
                context={"model": self.model_name, "expected": self.dimension, "actual": len(vector)},
            )
        return vector
