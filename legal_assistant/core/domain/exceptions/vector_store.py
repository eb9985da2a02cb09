"""Vector store exceptions."""

from .base import LegalAssistantError


class VectorStoreError(LegalAssistantError):
    """Base error for vector store operations."""

    error_code = "LA_VEC_001"


class VectorStoreConnectionError(VectorStoreError):
    """Failed to reach the vector store.

    Common causes:
    - Invalid URL or API key
    - Network connectivity issues
    - Service is down
    """

    error_code = "LA_VEC_002"


class VectorStoreQueryError(VectorStoreError):
    """The similarity search was rejected.

    Common causes:
    - Match function or collection does not exist
    - Embedding dimension mismatch with the index
    """

    error_code = "LA_VEC_003"


class VectorStoreResponseError(VectorStoreError):
    """The similarity search returned an unexpected shape."""

    error_code = "LA_VEC_004"
