"""Tests for logging setup."""

import json
import logging

import pytest

from legal_assistant.config.logging import ROOT_LOGGER_NAME, JSONFormatter, setup_logging

pytestmark = pytest.mark.unit


@pytest.fixture
def restore_package_logger():
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    handlers, level = list(package_logger.handlers), package_logger.level
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)


def make_record(**extra):
    record = logging.LogRecord(
        name="legal_assistant.core.services.query_pipeline",
        level=logging.WARNING,
        pathname=__file__,
        lineno=10,
        msg="Query failed (%s)",
        args=("embedding_failed",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_setup_is_idempotent(restore_package_logger):
    setup_logging("DEBUG")
    package_logger = setup_logging("WARNING")

    assert package_logger.name == ROOT_LOGGER_NAME
    assert len(package_logger.handlers) == 1
    assert package_logger.level == logging.WARNING


def test_unknown_level_falls_back_to_info(restore_package_logger):
    assert setup_logging("LOUD").level == logging.INFO


def test_json_format_selected(restore_package_logger):
    package_logger = setup_logging("INFO", json_format=True)

    assert isinstance(package_logger.handlers[0].formatter, JSONFormatter)


def test_client_loggers_quieted(restore_package_logger):
    setup_logging("INFO")

    assert logging.getLogger("httpx").level == logging.WARNING


def test_json_formatter_copies_stage_and_code():
    line = JSONFormatter().format(make_record(stage="embedding", error_code="LA_EMB_002"))

    entry = json.loads(line)
    assert entry["message"] == "Query failed (embedding_failed)"
    assert entry["level"] == "WARNING"
    assert entry["stage"] == "embedding"
    assert entry["error_code"] == "LA_EMB_002"
    assert "traceback" not in entry


def test_json_formatter_omits_absent_fields():
    entry = json.loads(JSONFormatter().format(make_record()))

    assert "stage" not in entry
    assert "error_code" not in entry
