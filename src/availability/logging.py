"""Structured logging for the availability engine, via structlog.

The engine only emits debug/warning events (dropped records, rejected or
switched columns, per-staff failures). Scripts call setup_logging() once;
everything is written to stderr so stdout can carry table or JSON output.
"""

import logging
import sys
from typing import TextIO

import structlog


def setup_logging(
    json_output: bool = False, log_level: str = "INFO", stream: TextIO | None = None
) -> None:
    """Configure structlog and route stdlib logging to the same stream.

    Args:
        json_output: If True, one JSON object per line. If False, console format.
        log_level: Logging level name; unknown names fall back to INFO.
        stream: Where log lines go. Defaults to stderr.
    """
    stream = stream or sys.stderr
    level = getattr(logging, log_level.upper(), logging.INFO)

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=False,
    )

    # openpyxl reports workbook quirks through stdlib logging
    root = logging.getLogger()
    root.handlers = [logging.StreamHandler(stream)]
    root.setLevel(level)


def get_logger(name: str) -> structlog.BoundLogger:
    """Logger bound to a module name (pass __name__)."""
    return structlog.get_logger(name)
