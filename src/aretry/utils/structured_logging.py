r"""Structured logging utilities for machine-readable log output.

The formatter in this module renders log records as JSON lines, which
suits log aggregation systems. It is opt-in: aretry never installs
handlers, it only emits records through module-level loggers.

Example:
    Render the attempt log of aretry as JSON:

    ```python
    import logging

    from aretry.observers import LoggingObserver
    from aretry.utils.structured_logging import StructuredFormatter

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())
    logger = logging.getLogger("aretry")
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)

    outcome = run(fetch, policy, on_attempt=LoggingObserver())
    ```

    Tag every record of a run with a correlation id:

    ```python
    from aretry.utils.structured_logging import correlation_scope

    with correlation_scope("job-42"):
        outcome = run(fetch, policy, on_attempt=LoggingObserver())
    ```
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "clear_correlation_id",
    "correlation_scope",
    "get_correlation_id",
    "log_structured",
    "set_correlation_id",
]

import contextvars
import json
import logging
import time
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Generator

# Context variable for correlation ID (thread-safe and async-safe)
_correlation_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "aretry_correlation_id", default=None
)

# Attributes every LogRecord carries; anything else came through ``extra``
_RECORD_ATTRIBUTES = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime", "taskName"}


def get_correlation_id() -> str | None:
    """Get the correlation ID of the current context.

    Returns:
        The current correlation ID, or None if not set.
    """
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID for the current context.

    Args:
        correlation_id: The correlation ID to set (e.g., job ID, trace ID).

    Example:
        ```pycon
        >>> from aretry.utils.structured_logging import (
        ...     clear_correlation_id,
        ...     get_correlation_id,
        ...     set_correlation_id,
        ... )
        >>> set_correlation_id("job-1")
        >>> get_correlation_id()
        'job-1'
        >>> clear_correlation_id()
        >>> get_correlation_id()

        ```
    """
    _correlation_id.set(correlation_id)


def clear_correlation_id() -> None:
    """Clear the correlation ID for the current context."""
    _correlation_id.set(None)


@contextmanager
def correlation_scope(correlation_id: str) -> Generator[None, None, None]:
    """Set a correlation ID for the duration of a ``with`` block.

    The previous correlation ID is restored on exit.

    Args:
        correlation_id: The correlation ID to set.

    Example:
        ```pycon
        >>> from aretry.utils.structured_logging import correlation_scope, get_correlation_id
        >>> with correlation_scope("job-2"):
        ...     get_correlation_id()
        ...
        'job-2'
        >>> get_correlation_id()

        ```
    """
    reset_token = _correlation_id.set(correlation_id)
    try:
        yield
    finally:
        _correlation_id.reset(reset_token)


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Each record becomes one JSON object with the fields ``timestamp``
    (ISO 8601, UTC), ``level``, ``logger``, ``message``, ``module``,
    ``function``, ``line`` and ``thread``, plus ``correlation_id`` when
    one is set, ``exception`` when the record carries exception info, and
    every field passed through ``extra``. Values that are not JSON
    serializable are rendered with ``repr``.

    Example:
        ```pycon
        >>> import json
        >>> import logging
        >>> from aretry.utils.structured_logging import StructuredFormatter
        >>> record = logging.LogRecord(
        ...     "aretry", logging.INFO, __file__, 1, "attempt failed", None, None
        ... )
        >>> record.attempt = 2
        >>> data = json.loads(StructuredFormatter().format(record))
        >>> data["message"], data["attempt"]
        ('attempt failed', 2)

        ```
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "thread": record.threadName,
        }

        correlation_id = get_correlation_id()
        if correlation_id is not None:
            log_data["correlation_id"] = correlation_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRIBUTES:
                log_data[key] = value

        return json.dumps(log_data, default=repr)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: ARG002
        """Format the record creation time as ISO 8601 in UTC, with
        millisecond precision. ``datefmt`` is ignored."""
        return (
            time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
            + f".{int(record.msecs):03d}Z"
        )


def log_structured(
    logger: logging.Logger,
    level: int,
    message: str,
    **extra: Any,
) -> None:
    """Log a message with structured fields.

    The fields end up as top-level keys of the JSON output when the
    handler uses ``StructuredFormatter``.

    Args:
        logger: Logger to use.
        level: Log level (e.g., logging.INFO).
        message: Log message.
        **extra: Additional structured fields.
    """
    logger.log(level, message, extra=extra)
