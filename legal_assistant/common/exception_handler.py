"""Error reporting shared by the query pipeline, the HTTP layer and the CLI.

A failure is logged as one JSON document naming the pipeline stage that
failed (``embedding``, ``retrieval``, ``generation``, ``request``) and the
fields the caller knows about it, such as the vector backend or the HTTP
route.
"""

import json
import logging
import traceback
from pathlib import Path
from typing import Any

from ..core.domain.exceptions import (
    EmbeddingRateLimitError,
    GenerationRateLimitError,
    LegalAssistantError,
    ValidationError,
    VectorStoreError,
)

logger = logging.getLogger(__name__)

BUILTIN_ERROR_CODE = "PYTHON_ERR"

# First match wins
_HTTP_STATUS_BY_TYPE: tuple[tuple[type[Exception] | tuple[type[Exception], ...], int], ...] = (
    (ValidationError, 400),
    ((EmbeddingRateLimitError, GenerationRateLimitError), 429),
    (VectorStoreError, 503),
    (LegalAssistantError, 500),
    (ValueError, 400),
    ((ConnectionError, TimeoutError), 503),
)


def describe_error(exc: Exception, include_trace: bool = False) -> dict[str, Any]:
    """Describe an exception as a JSON-serializable dictionary.

    Our own errors describe themselves; anything else is reported with the
    innermost frame of its traceback and the ``PYTHON_ERR`` code.
    """
    if isinstance(exc, LegalAssistantError):
        return exc.to_dict(include_trace=include_trace)

    frames = traceback.extract_tb(exc.__traceback__) if exc.__traceback__ else []
    raised_at: dict[str, Any] = {"function": "<unknown>", "file": "<unknown>", "line": 0}
    if frames:
        innermost = frames[-1]
        raised_at = {
            "function": innermost.name,
            "file": Path(innermost.filename).name,
            "line": innermost.lineno,
        }

    data: dict[str, Any] = {
        "error": {"type": type(exc).__name__, "code": BUILTIN_ERROR_CODE, "message": str(exc)},
        "raised_at": raised_at,
    }
    if include_trace and exc.__traceback__ is not None:
        data["trace"] = traceback.format_exception(exc)
    return data


def log_exception(
    exc: Exception,
    *,
    stage: str,
    log: logging.Logger | None = None,
    level: int = logging.ERROR,
    **fields: Any,
) -> None:
    """Log a failure in a pipeline stage.

    Tracebacks are included at ERROR and above only; a degraded stage that
    logs a warning gets the short form.

    Args:
        exc: The exception to report.
        stage: Pipeline stage or surface that failed.
        log: Logger to use (defaults to this module's logger).
        level: Logging level.
        **fields: Extra context, e.g. ``backend=...`` or ``path=...``.
    """
    data = describe_error(exc, include_trace=level >= logging.ERROR)
    data["stage"] = stage
    if fields:
        data.setdefault("context", {}).update(fields)

    (log or logger).log(
        level,
        json.dumps(data, indent=2, default=str, ensure_ascii=False),
        extra={"stage": stage, "error_code": data["error"]["code"]},
    )


def http_status_for(exc: Exception) -> int:
    """HTTP status for an exception that escaped the query pipeline."""
    for exc_types, status in _HTTP_STATUS_BY_TYPE:
        if isinstance(exc, exc_types):
            return status
    return 500
