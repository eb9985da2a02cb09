"""Exception hierarchy for the legal assistant.

All exceptions are re-exported here:

    from legal_assistant.core.domain.exceptions import EmbeddingError, InvalidInputError
"""

# Base classes
from .base import LegalAssistantError, RaiseSite

# Configuration exceptions
from .configuration import (
    ConfigurationError,
    InvalidConfigurationError,
    MissingAPIKeyError,
)

# Embedding exceptions
from .embedding import (
    EmbeddingAPIError,
    EmbeddingDimensionError,
    EmbeddingError,
    EmbeddingRateLimitError,
    EmbeddingResponseError,
)

# Generation exceptions
from .generation import (
    GenerationAPIError,
    GenerationBlockedError,
    GenerationError,
    GenerationRateLimitError,
    GenerationResponseError,
    GenerationTimeoutError,
)

# Retrieval exceptions
from .retrieval import RetrievalError

# Validation exceptions
from .validation import InvalidInputError, ValidationError

# Vector store exceptions
from .vector_store import (
    VectorStoreConnectionError,
    VectorStoreError,
    VectorStoreQueryError,
    VectorStoreResponseError,
)

__all__ = [
    # Base
    "RaiseSite",
    "LegalAssistantError",
    # Configuration
    "ConfigurationError",
    "MissingAPIKeyError",
    "InvalidConfigurationError",
    # Embedding
    "EmbeddingError",
    "EmbeddingAPIError",
    "EmbeddingRateLimitError",
    "EmbeddingResponseError",
    "EmbeddingDimensionError",
    # Vector store
    "VectorStoreError",
    "VectorStoreConnectionError",
    "VectorStoreQueryError",
    "VectorStoreResponseError",
    # Retrieval
    "RetrievalError",
    # Generation
    "GenerationError",
    "GenerationAPIError",
    "GenerationTimeoutError",
    "GenerationRateLimitError",
    "GenerationBlockedError",
    "GenerationResponseError",
    # Validation
    "ValidationError",
    "InvalidInputError",
]
