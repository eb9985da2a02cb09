"""Retrieval exceptions."""

from .base import LegalAssistantError


class RetrievalError(LegalAssistantError):
    """Document retrieval failed.

    Recovered locally by the retriever, which degrades to zero documents.
    """

    error_code = "LA_RET_001"
