r"""Define the exceptions raised or reported by the request facade.

Every failure of a facade operation is surfaced as a ``NetworkError``
carrying a ``domain`` label and a numeric ``code``. Lower-level httpx
failures are wrapped in ``TransportError`` and kept as ``cause``.
"""

from __future__ import annotations

__all__ = [
    "EncodingError",
    "InvalidURLError",
    "MalformedResponseError",
    "NetworkError",
    "TransportError",
]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class NetworkError(Exception):
    r"""Base class for all the errors reported by the request facade.

    Args:
        message: The human readable error message.
        domain: The error domain label (e.g. ``"Invalid URL"``).
        code: The numeric error code.
        url: The URL of the request, if known.
        method: The HTTP method of the request, if known.
        cause: The lower-level exception that triggered this error, if any.
        response: The HTTP response, if one was received.

    Example:
        ```pycon
        >>> from netfacade.exceptions import NetworkError
        >>> error = NetworkError("boom", domain="Custom", code=7)
        >>> error.domain, error.code
        ('Custom', 7)

        ```
    """

    domain: str = "Network error"
    code: int = 0

    def __init__(
        self,
        message: str,
        *,
        domain: str | None = None,
        code: int | None = None,
        url: str | None = None,
        method: str | None = None,
        cause: BaseException | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if domain is not None:
            self.domain = domain
        if code is not None:
            self.code = code
        self.url = url
        self.method = method
        self.cause = cause
        self.response = response

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(domain={self.domain!r}, code={self.code}, "
            f"method={self.method!r}, url={self.url!r})"
        )


class InvalidURLError(NetworkError):
    r"""Raised when the target string is not a valid absolute URL."""

    domain = "Invalid URL"
    code = 404


class MalformedResponseError(NetworkError):
    r"""Raised when the response body is not a JSON object."""

    domain = "Results returned by server illegitimate"
    code = 1


class EncodingError(NetworkError):
    r"""Raised when the request body cannot be built (e.g. unreadable
    upload file)."""

    domain = "Multipart encoding failed"
    code = 2


class TransportError(NetworkError):
    r"""Wrap a network, connection or timeout failure raised by httpx."""

    domain = "Transport failure"
    code = -1
