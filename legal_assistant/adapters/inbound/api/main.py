"""FastAPI application for the legal assistant API."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .... import __version__
from ....common.exception_handler import http_status_for, log_exception
from ....config.logging import setup_logging
from ....config.settings import settings
from ....core.domain.exceptions import LegalAssistantError
from ....core.services.query_pipeline import MESSAGE_REQUIRED
from .models import ErrorResponse
from .routers import health, query

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info("Legal assistant API starting up...")
    logger.info("Vector backend: %s, LLM: %s", settings.vector_backend, settings.llm_model)
    yield
    logger.info("Legal assistant API shutting down...")


def _error_json(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject malformed bodies with the same 400 as an empty message."""
    logger.info("Rejected malformed request to %s: %s", request.url.path, exc.errors())
    return _error_json(400, MESSAGE_REQUIRED)


async def legal_assistant_error_handler(
    request: Request, exc: LegalAssistantError
) -> JSONResponse:
    """Handle LegalAssistantError raised outside the pipeline (e.g. wiring)."""
    log_exception(exc, stage="request", log=logger, path=request.url.path, method=request.method)
    return _error_json(http_status_for(exc), exc.message)


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle any unhandled exception with a structured JSON response."""
    log_exception(exc, stage="request", log=logger, path=request.url.path, method=request.method)
    return _error_json(500, str(exc) or "An error occurred")


def create_app() -> FastAPI:
    """Create the FastAPI application."""
    setup_logging(settings.log_level, json_format=settings.log_json)

    app = FastAPI(
        title="Legal Assistant API",
        description=(
            "Answers legal questions with retrieval-augmented generation over "
            "a legal document corpus, in English, Hindi or Marathi."
        ),
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Sources"],
    )

    app.include_router(health.router)
    app.include_router(query.router)
    # Path used by the web front-end
    app.include_router(query.router, prefix="/api/chat")

    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(LegalAssistantError, legal_assistant_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    return app


app = create_app()

__all__ = ["app", "create_app"]
