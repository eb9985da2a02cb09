"""Shared utilities used across the core and the adapters."""

from .exception_handler import describe_error, http_status_for, log_exception

__all__ = ["describe_error", "http_status_for", "log_exception"]
