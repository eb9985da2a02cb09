"""Text generation exceptions."""

from .base import LegalAssistantError


class GenerationError(LegalAssistantError):
    """Base error for LLM generation."""

    error_code = "LA_GEN_001"


class GenerationAPIError(GenerationError):
    """Generation endpoint was unreachable or returned an error."""

    error_code = "LA_GEN_002"


class GenerationTimeoutError(GenerationAPIError):
    """Generation request timed out."""

    error_code = "LA_GEN_003"


class GenerationRateLimitError(GenerationError):
    """Generation quota or rate limit exceeded."""

    error_code = "LA_GEN_004"


class GenerationBlockedError(GenerationError):
    """The prompt or answer was rejected by the model's safety filters."""

    error_code = "LA_GEN_005"


class GenerationResponseError(GenerationError):
    """Generation endpoint returned no usable text."""

    error_code = "LA_GEN_006"
