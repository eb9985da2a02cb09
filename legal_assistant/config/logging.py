"""Logging setup for the API server and the CLI."""

import json
import logging
import sys
from typing import Any

ROOT_LOGGER_NAME = "legal_assistant"

# HTTP client libraries that log every request at INFO
CHATTY_LOGGERS = ("httpx", "httpcore", "urllib3", "google_genai")

# Values passed with ``extra=`` that are copied into JSON log lines
EXTRA_FIELDS = ("stage", "error_code")


class JSONFormatter(logging.Formatter):
    """One JSON object per log line, for log collectors."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in EXTRA_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                entry[name] = value
        if record.exc_info and record.exc_info[0] is not None:
            entry["traceback"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", json_format: bool = False) -> logging.Logger:
    """Configure the ``legal_assistant`` logger.

    Logs go to stderr so CLI answers on stdout stay clean. Calling this
    again replaces the handler instead of adding a second one.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR).
        json_format: Emit one JSON object per line instead of plain text.

    Returns:
        The package logger.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(numeric_level)
    package_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)-7s %(name)s: %(message)s",
                datefmt="%H:%M:%S",
            )
        )
    package_logger.addHandler(handler)

    # Request-level noise from the clients unless we are debugging
    for name in CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))

    return package_logger
