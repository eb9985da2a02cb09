"""Unit tests for the exception hierarchy and exception handler utilities."""

import json
import logging

import pytest

from legal_assistant.common.exception_handler import describe_error, http_status_for, log_exception
from legal_assistant.core.domain.exceptions import (
    ConfigurationError,
    EmbeddingAPIError,
    EmbeddingDimensionError,
    EmbeddingError,
    EmbeddingRateLimitError,
    EmbeddingResponseError,
    GenerationAPIError,
    GenerationBlockedError,
    GenerationError,
    GenerationRateLimitError,
    GenerationResponseError,
    GenerationTimeoutError,
    InvalidConfigurationError,
    InvalidInputError,
    LegalAssistantError,
    MissingAPIKeyError,
    RetrievalError,
    ValidationError,
    VectorStoreConnectionError,
    VectorStoreError,
    VectorStoreQueryError,
    VectorStoreResponseError,
)

pytestmark = pytest.mark.unit


class TestExceptionHierarchy:
    """Tests for the exception class hierarchy."""

    def test_legal_assistant_error_is_base(self):
        for cls in (
            ConfigurationError,
            ValidationError,
            EmbeddingError,
            VectorStoreError,
            RetrievalError,
            GenerationError,
        ):
            assert issubclass(cls, LegalAssistantError)

    def test_invalid_input_is_validation_error(self):
        assert issubclass(InvalidInputError, ValidationError)

    def test_embedding_family(self):
        for cls in (
            EmbeddingAPIError,
            EmbeddingRateLimitError,
            EmbeddingResponseError,
            EmbeddingDimensionError,
        ):
            assert issubclass(cls, EmbeddingError)

    def test_generation_family(self):
        for cls in (
            GenerationAPIError,
            GenerationRateLimitError,
            GenerationBlockedError,
            GenerationResponseError,
        ):
            assert issubclass(cls, GenerationError)
        assert issubclass(GenerationTimeoutError, GenerationAPIError)

    def test_vector_store_family(self):
        for cls in (VectorStoreConnectionError, VectorStoreQueryError, VectorStoreResponseError):
            assert issubclass(cls, VectorStoreError)

    def test_each_exception_has_unique_error_code(self):
        classes = [
            LegalAssistantError,
            ConfigurationError,
            MissingAPIKeyError,
            InvalidConfigurationError,
            ValidationError,
            InvalidInputError,
            EmbeddingError,
            EmbeddingAPIError,
            EmbeddingRateLimitError,
            EmbeddingResponseError,
            EmbeddingDimensionError,
            VectorStoreError,
            VectorStoreConnectionError,
            VectorStoreQueryError,
            VectorStoreResponseError,
            RetrievalError,
            GenerationError,
            GenerationAPIError,
            GenerationTimeoutError,
            GenerationRateLimitError,
            GenerationBlockedError,
            GenerationResponseError,
        ]
        codes = {cls.error_code for cls in classes}
        assert len(codes) == len(classes)


class TestExceptionCreation:
    """Tests for creating exceptions."""

    def test_basic_exception(self):
        exc = LegalAssistantError("Test error message")
        assert str(exc) == "Test error message"
        assert exc.message == "Test error message"
        assert exc.error_code == "LA_ERR_001"

    def test_exception_with_context(self):
        exc = VectorStoreConnectionError(
            "Connection failed", context={"url": "https://example.supabase.co"}
        )
        assert exc.extra_context["url"] == "https://example.supabase.co"

    def test_exception_with_cause(self):
        original = ConnectionError("Network unreachable")
        exc = EmbeddingAPIError("Embedding failed", cause=original)
        assert exc.cause is original

    def test_exception_captures_raise_site(self):
        def raise_it():
            raise InvalidInputError("bad")

        with pytest.raises(InvalidInputError) as info:
            raise_it()

        assert info.value.raised_at.function == "raise_it"
        assert info.value.raised_at.file == "test_exceptions.py"
        assert info.value.raised_at.line > 0


class TestExceptionToDict:
    """Tests for exception serialization."""

    def test_to_dict_structure(self):
        result = VectorStoreQueryError("Query failed").to_dict()

        assert result["error"] == {
            "type": "VectorStoreQueryError",
            "code": "LA_VEC_003",
            "message": "Query failed",
        }
        assert set(result["raised_at"]) == {"function", "file", "line"}

    def test_to_dict_includes_context_and_cause(self):
        exc = GenerationRateLimitError(
            "Rate limit", cause=ValueError("quota"), context={"model": "gemini"}
        )
        result = exc.to_dict()

        assert result["context"] == {"model": "gemini"}
        assert result["cause"] == {"type": "ValueError", "message": "quota"}

    def test_trace_of_cause_only_on_request(self):
        try:
            raise ConnectionError("Network unreachable")
        except ConnectionError as e:
            exc = EmbeddingAPIError("Embedding failed", cause=e)

        assert "trace" not in exc.to_dict()
        assert any("ConnectionError" in line for line in exc.to_dict(include_trace=True)["trace"])

    def test_to_dict_is_json_serializable(self):
        exc = VectorStoreConnectionError("Connection failed", context={"url": "x", "port": 443})
        assert isinstance(json.dumps(exc.to_dict()), str)


class TestExceptionHandler:
    """Tests for exception handler utilities."""

    def test_describe_custom_exception(self):
        result = describe_error(EmbeddingDimensionError("bad", context={"expected": 768}))

        assert result["error"]["type"] == "EmbeddingDimensionError"
        assert result["error"]["code"] == "LA_EMB_005"
        assert result["context"] == {"expected": 768}

    def test_describe_standard_exception(self):
        try:
            raise ValueError("Standard error")
        except ValueError as e:
            result = describe_error(e)

        assert result["error"] == {
            "type": "ValueError",
            "code": "PYTHON_ERR",
            "message": "Standard error",
        }
        assert result["raised_at"]["file"] == "test_exceptions.py"
        assert result["raised_at"]["function"] == "test_describe_standard_exception"

    def test_describe_with_trace(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError as e:
            result = describe_error(e, include_trace=True)

        assert any("RuntimeError" in line for line in result["trace"])

    def test_log_exception_records_stage_and_fields(self, caplog):
        log = logging.getLogger("legal_assistant.tests")

        with caplog.at_level(logging.WARNING, logger="legal_assistant.tests"):
            log_exception(
                EmbeddingAPIError("Embedding failed"),
                stage="embedding",
                log=log,
                level=logging.WARNING,
                model="text-embedding-004",
            )

        record = caplog.records[-1]
        assert record.levelno == logging.WARNING
        assert record.stage == "embedding"
        assert record.error_code == "LA_EMB_002"

        logged = json.loads(record.getMessage())
        assert logged["stage"] == "embedding"
        assert logged["context"] == {"model": "text-embedding-004"}
        assert "trace" not in logged

    def test_log_exception_adds_trace_for_errors(self, caplog):
        log = logging.getLogger("legal_assistant.tests")
        try:
            raise KeyError("missing")
        except KeyError as e:
            with caplog.at_level(logging.ERROR, logger="legal_assistant.tests"):
                log_exception(e, stage="request", log=log, path="/query", method="POST")

        logged = json.loads(caplog.records[-1].getMessage())
        assert logged["error"]["code"] == "PYTHON_ERR"
        assert logged["context"] == {"path": "/query", "method": "POST"}
        assert logged["trace"]

    @pytest.mark.parametrize(
        ("exc", "status"),
        [
            (InvalidInputError("x"), 400),
            (EmbeddingRateLimitError("x"), 429),
            (GenerationRateLimitError("x"), 429),
            (VectorStoreConnectionError("x"), 503),
            (MissingAPIKeyError("x"), 500),
            (GenerationTimeoutError("x"), 500),
            (EmbeddingAPIError("x"), 500),
            (ValueError("x"), 400),
            (TimeoutError("x"), 503),
            (RuntimeError("x"), 500),
        ],
    )
    def test_http_status_mapping(self, exc, status):
        assert http_status_for(exc) == status
