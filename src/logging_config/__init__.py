"""Structured Logging for the Schwab API client.

JSON or console log output, per-call request IDs bound through
contextvars, call timing, and header redaction.
"""

from src.logging_config.config import LogFormat, LoggingConfig, LogLevel
from src.logging_config.context import RequestContext, generate_request_id
from src.logging_config.performance import log_performance
from src.logging_config.setup import configure_logging, get_logger, redact_headers

__all__ = [
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "RequestContext",
    "configure_logging",
    "generate_request_id",
    "get_logger",
    "log_performance",
    "redact_headers",
]
