"""Input validation exceptions."""

from .base import LegalAssistantError


class ValidationError(LegalAssistantError):
    """Input validation failed."""

    error_code = "LA_VAL_001"


class InvalidInputError(ValidationError):
    """Query or text is missing, empty, or whitespace only."""

    error_code = "LA_VAL_002"
