r"""Structured logging utilities for retry events.

The executors emit their retry events with extra fields (``attempt``,
``delay_ms``, ``error_type``). This module provides an opt-in JSON
formatter that renders those fields, plus a context-local correlation
id to tie together the log lines of one logical run.

Example:
    Render aretry logs as JSON:

    ```python
    import logging
    from aretry.utils.structured_logging import StructuredFormatter

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())
    logger = logging.getLogger("aretry")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    ```

    Tag the retries of one job:

    ```python
    from aretry import constant, max_retries, run
    from aretry.utils.structured_logging import clear_correlation_id, set_correlation_id

    set_correlation_id("job-42")
    try:
        run(max_retries(3, constant(100)), fetch)
    finally:
        clear_correlation_id()
    ```
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "clear_correlation_id",
    "get_correlation_id",
    "log_structured",
    "set_correlation_id",
]

import contextvars
import json
import logging
import time
from typing import Any

_correlation_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "aretry_correlation_id", default=None
)

# Attributes every LogRecord carries; anything else came from ``extra``.
_RECORD_ATTRIBUTES = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime", "taskName"}


def get_correlation_id() -> str | None:
    """Return the correlation id of the current context, or ``None``.

    Example:
        ```pycon
        >>> from aretry.utils.structured_logging import get_correlation_id, set_correlation_id
        >>> set_correlation_id("run-1")
        >>> get_correlation_id()
        'run-1'

        ```
    """
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation id for the current context.

    The id is stored in a ``contextvars.ContextVar`` so concurrent
    threads and asyncio tasks each see their own value.

    Args:
        correlation_id: The id to attach to subsequent log records.
    """
    _correlation_id.set(correlation_id)


def clear_correlation_id() -> None:
    """Clear the correlation id for the current context."""
    _correlation_id.set(None)


class StructuredFormatter(logging.Formatter):
    """Format log records as single-line JSON objects.

    Each object holds ``timestamp``, ``level``, ``logger``, ``message``,
    ``module``, ``function`` and ``line``, the correlation id when one is
    set, the formatted exception when present, and every field passed
    through ``extra``.

    Example:
        ```pycon
        >>> import json
        >>> import logging
        >>> from io import StringIO
        >>> from aretry.utils.structured_logging import StructuredFormatter
        >>> stream = StringIO()
        >>> handler = logging.StreamHandler(stream)
        >>> handler.setFormatter(StructuredFormatter())
        >>> logger = logging.getLogger("doctest_structured")
        >>> logger.addHandler(handler)
        >>> logger.warning("retrying", extra={"attempt": 2})
        >>> json.loads(stream.getvalue())["attempt"]
        2

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
        }
        correlation_id = get_correlation_id()
        if correlation_id is not None:
            log_data["correlation_id"] = correlation_id
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRIBUTES:
                log_data[key] = value
        return json.dumps(log_data, default=str)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: ARG002
        """Format the record creation time as ISO 8601 UTC with milliseconds."""
        stamp = time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
        return f"{stamp}.{int(record.msecs):03d}Z"


def log_structured(logger: logging.Logger, level: int, message: str, **extra: Any) -> None:
    """Log ``message`` with ``extra`` as structured fields.

    Args:
        logger: The logger to use.
        level: The log level, e.g. ``logging.DEBUG``.
        message: The log message.
        **extra: Fields rendered by ``StructuredFormatter``.
    """
    logger.log(level, message, extra=extra)
