r"""Shared dispatch logic turning requests into callback outcomes.

Each ``execute_*`` function validates the URL, manages the httpx client
lifecycle, runs the raising request layer and reports exactly one
terminal callback through an ``Outcome``.
"""

from __future__ import annotations

__all__ = [
    "create_async_client",
    "create_client",
    "execute_http_method",
    "execute_http_method_async",
    "execute_upload",
    "execute_upload_async",
    "reject_invalid_url",
]

import logging
from typing import TYPE_CHECKING, Any

import httpx

from netfacade.core.validation import validate_timeout, validate_url
from netfacade.exceptions import InvalidURLError, NetworkError
from netfacade.outcome import Outcome, resolve
from netfacade.request import request
from netfacade.request_async import request_async
from netfacade.upload import upload
from netfacade.upload_async import upload_async

if TYPE_CHECKING:
    import os
    from collections.abc import Mapping

    from netfacade.callbacks import ErrorCallback, ProgressCallback, SuccessCallback
    from netfacade.core.config import FacadeConfig

logger: logging.Logger = logging.getLogger(__name__)


def create_client(timeout: float | httpx.Timeout | None = None) -> httpx.Client:
    """Create an httpx.Client, keeping the httpx default timeout when
    ``timeout`` is None."""
    validate_timeout(timeout)
    if timeout is None:
        return httpx.Client()
    return httpx.Client(timeout=timeout)


def create_async_client(timeout: float | httpx.Timeout | None = None) -> httpx.AsyncClient:
    """Async version of ``create_client``."""
    validate_timeout(timeout)
    if timeout is None:
        return httpx.AsyncClient()
    return httpx.AsyncClient(timeout=timeout)


def reject_invalid_url(url: Any, method: str, on_error: ErrorCallback | None) -> Outcome | None:
    """Report an invalid URL before any client is created.

    Returns:
        The failed outcome, already reported to ``on_error``, or ``None``
        if the URL is valid.
    """
    try:
        validate_url(url, method)
    except InvalidURLError as exc:
        logger.debug(f"Rejected {method} request to invalid URL {url!r}")
        return resolve(Outcome.failure(exc), on_error=on_error)
    return None


def execute_http_method(
    url: str,
    method: str,
    *,
    parameters: Mapping[str, Any] | None = None,
    client: httpx.Client | None = None,
    config: FacadeConfig | None = None,
    timeout: float | httpx.Timeout | None = None,
    on_success: SuccessCallback | None = None,
    on_error: ErrorCallback | None = None,
) -> Outcome:
    """Execute an HTTP request and report its outcome (synchronous).

    Args:
        url: The URL to send the request to.
        method: The HTTP method (GET or POST).
        parameters: Optional request parameters.
        client: An optional httpx.Client object to use for making requests.
            If None, a new client will be created and closed after use.
        config: An optional FacadeConfig object.
        timeout: Optional timeout for the created client. Only used if
            client is None.
        on_success: Optional callback receiving the decoded JSON object.
        on_error: Optional callback receiving the NetworkError.

    Returns:
        The outcome reported to the callbacks.

    Raises:
        ValueError: If timeout is non-positive.
    """
    rejected = reject_invalid_url(url, method, on_error)
    if rejected is not None:
        return rejected

    owns_client = client is None
    client = client or create_client(timeout)
    try:
        outcome = Outcome.success(
            request(url, method, client=client, parameters=parameters, config=config)
        )
    except NetworkError as exc:
        outcome = Outcome.failure(exc)
    finally:
        if owns_client:
            client.close()
    return resolve(outcome, on_success=on_success, on_error=on_error)


async def execute_http_method_async(
    url: str,
    method: str,
    *,
    parameters: Mapping[str, Any] | None = None,
    client: httpx.AsyncClient | None = None,
    config: FacadeConfig | None = None,
    timeout: float | httpx.Timeout | None = None,
    on_success: SuccessCallback | None = None,
    on_error: ErrorCallback | None = None,
) -> Outcome:
    """Execute an HTTP request and report its outcome (asynchronous).

    See ``execute_http_method`` for the arguments.
    """
    rejected = reject_invalid_url(url, method, on_error)
    if rejected is not None:
        return rejected

    owns_client = client is None
    client = client or create_async_client(timeout)
    try:
        outcome = Outcome.success(
            await request_async(url, method, client=client, parameters=parameters, config=config)
        )
    except NetworkError as exc:
        outcome = Outcome.failure(exc)
    finally:
        if owns_client:
            await client.aclose()
    return resolve(outcome, on_success=on_success, on_error=on_error)


def execute_upload(
    url: str,
    file: str | os.PathLike[str],
    *,
    parameters: Mapping[str, Any] | None = None,
    client: httpx.Client | None = None,
    config: FacadeConfig | None = None,
    timeout: float | httpx.Timeout | None = None,
    on_success: SuccessCallback | None = None,
    on_progress: ProgressCallback | None = None,
    on_error: ErrorCallback | None = None,
) -> Outcome:
    """Execute a multipart upload and report its outcome (synchronous).

    Args:
        url: The URL to upload to.
        file: The path or ``file://`` URI of the file to upload.
        parameters: Optional extra form fields.
        client: An optional httpx.Client object to use for making requests.
            If None, a new client will be created and closed after use.
        config: An optional FacadeConfig object.
        timeout: Optional timeout for the created client. Only used if
            client is None.
        on_success: Optional callback receiving the decoded JSON object.
        on_progress: Optional callback receiving the uploaded fraction.
        on_error: Optional callback receiving the NetworkError.

    Returns:
        The outcome reported to the callbacks.
    """
    rejected = reject_invalid_url(url, "POST", on_error)
    if rejected is not None:
        return rejected

    owns_client = client is None
    client = client or create_client(timeout)
    try:
        outcome = Outcome.success(
            upload(
                url,
                file,
                client=client,
                parameters=parameters,
                config=config,
                on_progress=on_progress,
            )
        )
    except NetworkError as exc:
        outcome = Outcome.failure(exc)
    finally:
        if owns_client:
            client.close()
    return resolve(outcome, on_success=on_success, on_error=on_error)


async def execute_upload_async(
    url: str,
    file: str | os.PathLike[str],
    *,
    parameters: Mapping[str, Any] | None = None,
    client: httpx.AsyncClient | None = None,
    config: FacadeConfig | None = None,
    timeout: float | httpx.Timeout | None = None,
    on_success: SuccessCallback | None = None,
    on_progress: ProgressCallback | None = None,
    on_error: ErrorCallback | None = None,
) -> Outcome:
    """Execute a multipart upload and report its outcome (asynchronous).

    See ``execute_upload`` for the arguments.
    """
    rejected = reject_invalid_url(url, "POST", on_error)
    if rejected is not None:
        return rejected

    owns_client = client is None
    client = client or create_async_client(timeout)
    try:
        outcome = Outcome.success(
            await upload_async(
                url,
                file,
                client=client,
                parameters=parameters,
                config=config,
                on_progress=on_progress,
            )
        )
    except NetworkError as exc:
        outcome = Outcome.failure(exc)
    finally:
        if owns_client:
            await client.aclose()
    return resolve(outcome, on_success=on_success, on_error=on_error)
