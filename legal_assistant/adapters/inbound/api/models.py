"""Pydantic models for API requests and responses."""

from pydantic import BaseModel, Field


class QueryRequest(BaseModel):
    """Request model for asking a legal question."""

    message: str | None = Field(
        None,
        description=(
            "The legal question, optionally prefixed with a language marker "
            "such as [Language: Hindi]"
        ),
        json_schema_extra={"example": "[Language: Hindi] What are the grounds for divorce?"},
    )


class QueryResponse(BaseModel):
    """Response model for an answered question."""

    ok: bool = Field(True, description="Always true for a successful answer")
    reply: str = Field(..., description="The AI-generated answer")
    sources: int = Field(..., ge=0, description="Number of documents used as context")


class ErrorResponse(BaseModel):
    """Response model for a failed request."""

    ok: bool = Field(False, description="Always false for an error")
    error: str = Field(..., description="Human-readable error message")


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")
    vector_backend: str = Field(..., description="Configured vector store backend")
