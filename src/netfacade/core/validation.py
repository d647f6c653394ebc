r"""Parameter validation utilities for the request facade.

This module provides validation functions for URLs and configuration
values. URL validation happens before any network activity.
"""

from __future__ import annotations

__all__ = ["validate_chunk_size", "validate_timeout", "validate_url"]

from typing import Any

import httpx

from netfacade.exceptions import InvalidURLError


def validate_url(url: Any, method: str | None = None) -> httpx.URL:
    """Validate that ``url`` parses into an absolute URL.

    Args:
        url: The candidate URL string.
        method: The HTTP method, only used to enrich the error.

    Returns:
        The parsed ``httpx.URL``.

    Raises:
        InvalidURLError: If the value is not a string, cannot be parsed,
            or lacks a scheme or host.

    Example:
        ```pycon
        >>> from netfacade.core.validation import validate_url
        >>> validate_url("https://api.example.com/data").host
        'api.example.com'
        >>> validate_url("not a url")  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        netfacade.exceptions.InvalidURLError: Invalid URL: 'not a url'

        ```
    """
    if not isinstance(url, str) or not url.strip():
        raise InvalidURLError(f"Invalid URL: {url!r}", url=str(url), method=method)
    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, TypeError, ValueError) as exc:
        raise InvalidURLError(
            f"Invalid URL: {url!r}", url=url, method=method, cause=exc
        ) from exc
    if not parsed.is_absolute_url or not parsed.host:
        raise InvalidURLError(f"Invalid URL: {url!r}", url=url, method=method)
    return parsed


def validate_timeout(timeout: float | httpx.Timeout | None) -> None:
    """Validate timeout parameter.

    Args:
        timeout: Maximum seconds to wait for server responses, or ``None``
            to keep the httpx default. Must be > 0 if numeric.

    Raises:
        ValueError: If timeout is a numeric value <= 0.

    Example:
        ```pycon
        >>> from netfacade.core.validation import validate_timeout
        >>> validate_timeout(10.0)
        >>> validate_timeout(None)

        ```
    """
    if isinstance(timeout, (int, float)) and timeout <= 0:
        msg = f"timeout must be > 0, got {timeout}"
        raise ValueError(msg)


def validate_chunk_size(chunk_size: int) -> None:
    """Validate the upload chunk size.

    Raises:
        ValueError: If chunk_size is not a positive integer.
    """
    if not isinstance(chunk_size, int) or isinstance(chunk_size, bool) or chunk_size <= 0:
        msg = f"chunk_size must be a positive integer, got {chunk_size!r}"
        raise ValueError(msg)
