"""Domain models for the legal assistant.

- document: RetrievedDocument returned by similarity search
- query: Query parsing and the Language enum
- results: Success / Failure pipeline results and PreparedPrompt

    from legal_assistant.core.domain import Query, RetrievedDocument, Success
"""

from .document import RetrievedDocument
from .query import Language, Query, detect_language, strip_language_marker
from .results import ErrorKind, Failure, PipelineResult, PreparedPrompt, Success

__all__ = [
    # Document models
    "RetrievedDocument",
    # Query models
    "Language",
    "Query",
    "detect_language",
    "strip_language_marker",
    # Results
    "ErrorKind",
    "Failure",
    "PipelineResult",
    "PreparedPrompt",
    "Success",
]
