r"""Contains the synchronous HTTP POST operation reporting through callbacks."""

from __future__ import annotations

__all__ = ["send_post"]

from typing import TYPE_CHECKING, Any

from netfacade.core.http_logic import execute_http_method

if TYPE_CHECKING:
    from collections.abc import Mapping

    import httpx

    from netfacade.callbacks import ErrorCallback, SuccessCallback
    from netfacade.core.config import FacadeConfig
    from netfacade.outcome import Outcome


def send_post(
    url: str,
    parameters: Mapping[str, Any] | None = None,
    *,
    on_success: SuccessCallback | None = None,
    on_error: ErrorCallback | None = None,
    client: httpx.Client | None = None,
    config: FacadeConfig | None = None,
    timeout: float | httpx.Timeout | None = None,
) -> Outcome:
    r"""Send an HTTP POST request and report the decoded JSON object.

    Exactly one of ``on_success`` and ``on_error`` is invoked. An
    invalid URL is reported before any client is created.

    Args:
        url: The absolute URL to send the POST request to.
        parameters: Optional request parameters, url-encoded into the
            request body.
        on_success: Optional callback receiving the decoded JSON object.
        on_error: Optional callback receiving the NetworkError.
        client: An optional httpx.Client object to use for making requests.
            If None, a new client will be created and closed after use.
        config: An optional FacadeConfig object. If None, defaults are used.
        timeout: Maximum seconds to wait for the server response.
            Only used if client is None. If None, the httpx default applies.

    Returns:
        The Outcome reported to the callbacks.

    Raises:
        ValueError: If timeout is non-positive.

    Example:
        ```pycon
        >>> from netfacade import send_post
        >>> outcome = send_post(
        ...     "https://api.example.com/data", {"page": 1}, on_success=print
        ... )  # doctest: +SKIP

        ```
    """
    return execute_http_method(
        url=url,
        method="POST",
        parameters=parameters,
        client=client,
        config=config,
        timeout=timeout,
        on_success=on_success,
        on_error=on_error,
    )
