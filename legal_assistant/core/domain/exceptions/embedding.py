"""Embedding exceptions.

An embedding failure is fatal to the request: without a query vector
there is nothing to search with.
"""

from .base import LegalAssistantError


class EmbeddingError(LegalAssistantError):
    """Failed to generate an embedding."""

    error_code = "LA_EMB_001"


class EmbeddingAPIError(EmbeddingError):
    """Embedding endpoint was unreachable or returned an error."""

    error_code = "LA_EMB_002"


class EmbeddingRateLimitError(EmbeddingError):
    """Embedding quota or rate limit exceeded."""

    error_code = "LA_EMB_003"


class EmbeddingResponseError(EmbeddingError):
    """Embedding endpoint returned a malformed or empty response."""

    error_code = "LA_EMB_004"


class EmbeddingDimensionError(EmbeddingError):
    """Embedding length does not match the deployment's dimension."""

    error_code = "LA_EMB_005"
