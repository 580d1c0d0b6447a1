"""
Structured logging utilities.

Provides a context manager for structured operation logging with timing,
error tracking, and metadata.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any

import structlog

logger = structlog.get_logger()


def configure_logging(level: str = "INFO", fmt: str | None = None, file_path: str | None = None) -> None:
    """
    Route structlog events through the stdlib root logger.

    Events are filtered by `level`, rendered as key=value pairs and handed to
    the root logger, whose handler formats them with `fmt` and writes them to
    `file_path` or stderr.

    Args:
        level: Logging level name (DEBUG|INFO|WARNING|ERROR)
        fmt: Log record format string
        file_path: Optional file to write logs to instead of stderr
    """
    handlers: list[logging.Handler] | None = None
    if file_path:
        handlers = [logging.FileHandler(file_path, encoding="utf-8")]

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=fmt or "%(asctime)s %(levelname)8s %(message)s",
        handlers=handlers,
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(key_order=["event"], drop_missing=True),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


@contextmanager
def log_operation(operation: str, **context: Any) -> Iterator[dict[str, Any]]:
    """
    Context manager for structured operation logging.

    Logs operation start, completion, and errors with timing information.
    The yielded dict can be filled with result metadata that is attached to
    the completion event.

    Args:
        operation: Name of the operation being performed
        **context: Additional context to include in logs

    Example:
        with log_operation("codeowners_reload", roots=roots) as result:
            result["rule_count"] = len(snapshot.rules)
    """
    start_time = time.time()
    result: dict[str, Any] = {}

    logger.info(f"{operation}_started", operation=operation, **context)

    try:
        yield result
    except Exception as e:
        latency_ms = int((time.time() - start_time) * 1000)
        logger.exception(
            f"{operation}_failed",
            operation=operation,
            error=str(e),
            latency_ms=latency_ms,
            **context,
        )
        raise
    else:
        latency_ms = int((time.time() - start_time) * 1000)
        logger.info(
            f"{operation}_completed",
            operation=operation,
            latency_ms=latency_ms,
            **context,
            **result,
        )


def log_structured(
    logger_obj: Any,
    event: str,
    level: str = "info",
    **context: Any,
) -> None:
    """
    Lightweight structured logging helper.

    Args:
        logger_obj: structlog logger instance to use.
        event: Event/operation name.
        level: Logging level (debug|info|warning|error).
        **context: Arbitrary key/value metadata.
    """
    log_fn: Callable[..., Any] = getattr(logger_obj, level, logger_obj.info)
    log_fn(event, **context)
