r"""Opt-in JSON logging with correlation IDs.

The package logs through the standard ``logging`` module. Completion
events carry structured fields (``url``, ``method``, ``status_code``,
``elapsed``) which ``StructuredFormatter`` renders as one JSON object per
line.

Example:
    ```python
    import logging
    from netfacade.utils.structured_logging import StructuredFormatter, set_correlation_id

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())
    logger = logging.getLogger("netfacade")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)

    set_correlation_id("upload-42")
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
    "netfacade_correlation_id", default=None
)

# Attributes present on every LogRecord; anything else came from ``extra``
_RECORD_ATTRIBUTES = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


def get_correlation_id() -> str | None:
    """Get the correlation ID of the current context, if any."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID for the current context.

    The value lives in a context variable so concurrent threads and
    asyncio tasks each see their own ID.

    Example:
        ```pycon
        >>> from netfacade.utils.structured_logging import (
        ...     clear_correlation_id,
        ...     get_correlation_id,
        ...     set_correlation_id,
        ... )
        >>> set_correlation_id("req-1")
        >>> get_correlation_id()
        'req-1'
        >>> clear_correlation_id()

        ```
    """
    _correlation_id.set(correlation_id)


def clear_correlation_id() -> None:
    _correlation_id.set(None)


class StructuredFormatter(logging.Formatter):
    """Format log records as single-line JSON objects.

    The output contains ``timestamp``, ``level``, ``logger``, ``message``,
    ``module``, ``function`` and ``line``, the ``correlation_id`` when one
    is set, ``exception`` when the record carries exception info, and every
    field passed through ``extra``. Values that are not JSON serializable
    are rendered with ``str()``.
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

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: N802
        """Format the record time as ISO 8601 UTC with milliseconds."""
        if datefmt is not None:
            return time.strftime(datefmt, time.gmtime(record.created))
        return (
            time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
            + f".{int(record.msecs):03d}Z"
        )


def log_structured(logger: logging.Logger, level: int, message: str, **extra: Any) -> None:
    """Log ``message`` with ``extra`` structured fields.

    Example:
        ```pycon
        >>> import logging
        >>> from netfacade.utils.structured_logging import log_structured
        >>> log_structured(logging.getLogger("demo"), logging.DEBUG, "done", status_code=200)

        ```
    """
    logger.log(level, message, extra=extra)
