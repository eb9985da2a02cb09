"""Query endpoints for asking legal questions."""

import logging
from collections.abc import Iterator

from fastapi import APIRouter
from fastapi.responses import JSONResponse, StreamingResponse

from .....common.exception_handler import log_exception
from .....core.domain import Failure, PreparedPrompt
from .....core.domain.exceptions import LegalAssistantError
from .....core.services import QueryPipeline, validate_message
from ..deps import get_pipeline
from ..models import ErrorResponse, QueryRequest, QueryResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["query"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Message is missing or empty"},
    500: {"model": ErrorResponse, "description": "Embedding or generation failed"},
}


def _error_response(failure: Failure) -> JSONResponse:
    logger.warning("Query failed (%s): %s", failure.error_kind.value, failure.message)
    return JSONResponse(
        status_code=failure.http_status,
        content=ErrorResponse(error=failure.message).model_dump(),
    )


@router.post("/query", response_model=QueryResponse, responses=ERROR_RESPONSES)
def ask_question(request: QueryRequest) -> JSONResponse:
    """Answer a legal question using the retrieved legal documents.

    The message is checked before the pipeline is built, so an empty
    message is rejected even when the service is not configured.

    Args:
        request: The request containing the user's message.

    Returns:
        ``{"ok": true, "reply", "sources"}`` or ``{"ok": false, "error"}``.
    """
    checked = validate_message(request.message)
    if isinstance(checked, Failure):
        return _error_response(checked)

    result = get_pipeline().run(request.message)

    if isinstance(result, Failure):
        return _error_response(result)

    return JSONResponse(
        content=QueryResponse(reply=result.answer, sources=result.source_count).model_dump()
    )


def _stream_answer(pipeline: QueryPipeline, prepared: PreparedPrompt) -> Iterator[str]:
    try:
        yield from pipeline.stream(prepared)
    except Exception as e:
        log_exception(e, stage="generation", log=logger, stream=True)
        message = e.message if isinstance(e, LegalAssistantError) else "An error occurred"
        yield f"\n\nError: {message}"


@router.post("/query/stream", responses=ERROR_RESPONSES)
def ask_question_stream(request: QueryRequest):
    """Stream the answer as plain text.

    The number of documents used as context is sent in the ``X-Sources``
    header. Validation and embedding failures are reported as JSON before
    any text is streamed.
    """
    checked = validate_message(request.message)
    if isinstance(checked, Failure):
        return _error_response(checked)

    pipeline = get_pipeline()
    prepared = pipeline.prepare(request.message)

    if isinstance(prepared, Failure):
        return _error_response(prepared)

    return StreamingResponse(
        _stream_answer(pipeline, prepared),
        media_type="text/plain; charset=utf-8",
        headers={"X-Sources": str(prepared.source_count)},
    )
