r"""Exception wrapping utilities for httpx and encoding failures."""

from __future__ import annotations

__all__ = ["wrap_encoding_error", "wrap_transport_error"]

import logging

import httpx

from netfacade.exceptions import EncodingError, TransportError

logger: logging.Logger = logging.getLogger(__name__)


def wrap_transport_error(exc: httpx.RequestError, url: str, method: str) -> TransportError:
    """Wrap an httpx request error into a ``TransportError``.

    Args:
        exc: The httpx error (connection error, timeout, protocol error...).
        url: The URL that was requested, used in error messages.
        method: The HTTP method name, used in error messages.

    Returns:
        The wrapping error. The caller is expected to raise it ``from exc``.

    Example:
        ```pycon
        >>> import httpx
        >>> from netfacade.utils.exceptions import wrap_transport_error
        >>> error = wrap_transport_error(httpx.ConnectError("refused"), "https://a.b", "GET")
        >>> error.code, error.domain
        (-1, 'Transport failure')

        ```
    """
    error_type = type(exc).__name__
    if isinstance(exc, httpx.TimeoutException):
        message = f"{method} request to {url} timed out: {exc}"
    else:
        message = f"{method} request to {url} failed with {error_type}: {exc}"
    logger.debug(message)
    return TransportError(message, url=url, method=method, cause=exc)


def wrap_encoding_error(exc: Exception, url: str, method: str) -> EncodingError:
    """Wrap a failure to encode request parameters into an
    ``EncodingError``, logged at WARNING.

    Example:
        ```pycon
        >>> from netfacade.utils.exceptions import wrap_encoding_error
        >>> error = wrap_encoding_error(ValueError("bad"), "https://a.b", "POST")
        >>> error.code, error.domain
        (2, 'Multipart encoding failed')

        ```
    """
    message = f"Cannot encode {method} parameters for {url}: {exc}"
    logger.warning(message)
    return EncodingError(message, url=url, method=method, cause=exc)
