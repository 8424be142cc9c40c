"""Logging Setup.

One-call logging configuration for applications using the client:
JSON lines for production, colored console output for development.
"""

import json
import logging
import os
import sys
from dataclasses import replace
from datetime import datetime, timezone
from typing import Mapping, Optional

from src.logging_config.config import DEFAULT_LOGGING_CONFIG, LogFormat, LoggingConfig, LogLevel
from src.logging_config.context import get_context_dict

_RECORD_FIELDS = ("duration_ms", "status_code", "url", "extra_data")


class StructuredFormatter(logging.Formatter):
    """JSON structured log formatter.

    Produces one JSON object per log line with consistent fields:
    timestamp, level, logger, message, plus any bound call context.
    """

    def __init__(self, service_name: str = "schwab-api", include_caller: bool = True):
        super().__init__()
        self.service_name = service_name
        self.include_caller = include_caller

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service_name,
        }

        if self.include_caller:
            log_entry["module"] = record.module
            log_entry["function"] = record.funcName
            log_entry["line"] = record.lineno

        log_entry.update(get_context_dict())

        if record.exc_info and record.exc_info[0] is not None:
            log_entry["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": self.formatException(record.exc_info),
            }

        for key in _RECORD_FIELDS:
            if hasattr(record, key):
                log_entry[key] = getattr(record, key)

        return json.dumps(log_entry, default=str)


class ConsoleFormatter(logging.Formatter):
    """Colored, human-readable formatter for development."""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        timestamp = datetime.now(timezone.utc).strftime("%H:%M:%S.%f")[:-3]

        ctx = get_context_dict()
        ctx_str = ""
        if ctx:
            ctx_str = " [" + ", ".join(f"{k}={v}" for k, v in ctx.items()) + "]"

        line = (
            f"{color}{timestamp} {record.levelname:8s}{self.RESET} "
            f"{record.name}: {record.getMessage()}{ctx_str}"
        )

        if record.exc_info and record.exc_info[0] is not None:
            line += "\n" + self.formatException(record.exc_info)

        return line


def redact_headers(
    headers: Mapping[str, str],
    config: Optional[LoggingConfig] = None,
) -> dict[str, str]:
    """Copy of ``headers`` safe to log.

    Sensitive values are masked; for Authorization the scheme is kept so
    Basic and Bearer calls stay distinguishable in logs.
    """
    config = config or DEFAULT_LOGGING_CONFIG
    redacted = {name.lower() for name in config.redacted_headers}
    safe = {}
    for name, value in headers.items():
        if name.lower() not in redacted:
            safe[name] = value
        elif name.lower() == "authorization" and " " in value:
            safe[name] = value.split(" ", 1)[0] + " ***"
        else:
            safe[name] = "***"
    return safe


def configure_logging(config: Optional[LoggingConfig] = None) -> None:
    """Configure the root logger.

    Call once at application startup.

    Args:
        config: Logging configuration. Uses defaults if not provided.
                SCHWAB_LOG_LEVEL and SCHWAB_LOG_FORMAT env vars override
                the level and format.
    """
    config = config or DEFAULT_LOGGING_CONFIG

    env_level = os.environ.get("SCHWAB_LOG_LEVEL", "").upper()
    if env_level in LogLevel.__members__:
        config = replace(config, level=LogLevel(env_level))

    env_format = os.environ.get("SCHWAB_LOG_FORMAT", "").lower()
    if env_format in [f.value for f in LogFormat]:
        config = replace(config, format=LogFormat(env_format))

    if config.format == LogFormat.JSON:
        formatter = StructuredFormatter(
            service_name=config.service_name,
            include_caller=config.include_caller,
        )
    else:
        formatter = ConsoleFormatter()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, config.level.value))

    # httpx/httpcore log full URLs and headers at DEBUG
    for noisy in ("httpx", "httpcore", "asyncio"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a standard library logger (routed through configure_logging)."""
    return logging.getLogger(name)
