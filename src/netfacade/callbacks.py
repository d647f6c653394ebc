r"""Callback types and invocation helpers.

A facade operation reports its lifecycle through up to three optional
callbacks:

- on_success: Called once with the decoded JSON object
- on_progress: Called zero or more times with the uploaded fraction
  (uploads only)
- on_error: Called once with the ``NetworkError`` describing the failure

Exactly one of ``on_success`` and ``on_error`` is invoked per call.

Example:
    ```pycon
    >>> from netfacade import send_get
    >>> def show(result):
    ...     print(result)
    ...
    >>> outcome = send_get("https://api.example.com/data", on_success=show)  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = [
    "ErrorCallback",
    "JsonObject",
    "ProgressCallback",
    "SuccessCallback",
    "invoke_on_error",
    "invoke_on_progress",
    "invoke_on_success",
]

from collections.abc import Callable
from typing import Any

from netfacade.exceptions import NetworkError

JsonObject = dict[str, Any]
SuccessCallback = Callable[[JsonObject], None]
ProgressCallback = Callable[[float], None]
ErrorCallback = Callable[[NetworkError], None]


def invoke_on_success(on_success: SuccessCallback | None, result: JsonObject) -> None:
    """Invoke on_success callback if provided.

    Args:
        on_success: Optional callback to invoke with the decoded object.
        result: The decoded JSON object.
    """
    if on_success is not None:
        on_success(result)


def invoke_on_error(on_error: ErrorCallback | None, error: NetworkError) -> None:
    """Invoke on_error callback if provided.

    Args:
        on_error: Optional callback to invoke with the error.
        error: The error that terminated the request.
    """
    if on_error is not None:
        on_error(error)


def invoke_on_progress(
    on_progress: ProgressCallback | None,
    *,
    completed: int,
    total: int,
) -> None:
    """Invoke on_progress callback if provided.

    Args:
        on_progress: Optional callback to invoke with the progress fraction.
        completed: The number of bytes sent so far.
        total: The total number of bytes to send. A zero total reports 1.0.

    Example:
        ```pycon
        >>> from netfacade.callbacks import invoke_on_progress
        >>> invoke_on_progress(print, completed=25, total=100)
        0.25

        ```
    """
    if on_progress is not None:
        fraction = 1.0 if total <= 0 else min(max(completed / total, 0.0), 1.0)
        on_progress(fraction)
