"""Logging infrastructure for the importer.

Provides configurable levels and per-conversion correlation ids so that
log lines from the parsers, the assembler and the emitter can be tied to
the project being converted.
"""

from __future__ import annotations

import logging
import os
import sys
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

# Conversion ID tracking for per-project correlation
conversion_id_ctx: ContextVar[str | None] = ContextVar("conversion_id", default=None)


def get_conversion_id() -> str | None:
    """Get the current conversion ID if available."""
    return conversion_id_ctx.get()


@contextmanager
def conversion_context(conversion_id: str | None = None) -> Iterator[str]:
    """Tag every log record emitted inside the block with a conversion ID."""
    cid = conversion_id or uuid.uuid4().hex[:8]
    token = conversion_id_ctx.set(cid)
    try:
        yield cid
    finally:
        conversion_id_ctx.reset(token)


def setup_logging(
    level: int | str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """Configure logging for the application.

    Args:
        level: Logging level (e.g., 'DEBUG', 'INFO', 'ERROR').
               Defaults to LOGGING_LEVEL env var or 'INFO'.
        format_string: Custom log format string. Defaults to a structured format.

    Returns:
        The root logger configured for the application.
    """
    if level is None:
        level = os.environ.get("LOGGING_LEVEL", "INFO")

    if format_string is None:
        format_string = (
            "%(asctime)s [%(levelname)s] [%(name)s] [conversion=%(conversion_id)s] %(message)s"
        )

    logger = logging.getLogger()
    logger.setLevel(level)
    logger.handlers.clear()

    # stdout carries generated source and the MCP stdio transport
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(format_string))
    console_handler.addFilter(_ConversionIdFilter())
    logger.addHandler(console_handler)

    logging.getLogger("asyncio").setLevel("WARNING")
    logging.getLogger("asyncio").propagate = False

    return logger


class _ConversionIdFilter(logging.Filter):
    """Fill in ``conversion_id`` for records logged outside an adapter."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "conversion_id"):
            record.conversion_id = get_conversion_id() or "-"
        return True


class ConversionLoggerAdapter(logging.LoggerAdapter[Any]):
    """Logger adapter that automatically adds the conversion ID to log records."""

    def process(self, msg: str, kwargs: Any) -> tuple[str, Any]:
        """Process the log record and add conversion context."""
        extra = kwargs.get("extra")
        if extra is None:
            extra = {}
        extra["conversion_id"] = get_conversion_id() or "-"
        kwargs["extra"] = extra
        return msg, kwargs


def create_logger(name: str) -> ConversionLoggerAdapter:
    """Create a logger for a module that stamps records with the conversion ID.

    Args:
        name: The module name (e.g., __name__).
    """
    return ConversionLoggerAdapter(logging.getLogger(name), {})
