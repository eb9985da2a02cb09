"""Configuration management for the legal assistant."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _sanitize_secret(value: str) -> str:
    """Remove BOM characters and whitespace from secrets.

    Secrets pasted into env files or secret managers may carry a BOM that
    breaks HTTP headers.
    """
    if not value:
        return value
    return value.lstrip("\ufeff").strip()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Google AI API
    google_api_key: str = ""

    # Model settings
    embedding_model: str = "text-embedding-004"
    embedding_dimension: int | None = 768
    llm_model: str = "gemini-2.5-flash"
    llm_temperature: float = 0.7
    llm_max_output_tokens: int = 2048
    request_timeout_seconds: float | None = 60.0

    # Vector store
    vector_backend: Literal["supabase", "qdrant"] = "supabase"

    supabase_url: str = ""
    supabase_key: str = ""
    supabase_match_function: str = "match_documents"

    qdrant_url: str = ""
    qdrant_api_key: str = ""
    qdrant_collection: str = "legal_documents"

    @field_validator(
        "google_api_key",
        "supabase_url",
        "supabase_key",
        "qdrant_url",
        "qdrant_api_key",
        mode="after",
    )
    @classmethod
    def sanitize_secrets(cls, value: str) -> str:
        """Remove BOM and whitespace from secret values."""
        return _sanitize_secret(value)

    # RAG settings
    top_k_results: int = Field(5, ge=1)
    max_context_chars: int | None = Field(None, ge=1)
    jurisdiction: str = "Indian law"
    strip_language_marker_for_embedding: bool = False

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Logging
    log_level: str = "INFO"
    log_json: bool = False


# Global settings instance
settings = Settings()
