r"""Threaded context manager dispatching facade calls without blocking.

``RequestFacade`` owns an ``httpx.Client`` and a thread pool. Each call
validates its URL on the calling thread, then runs on a worker thread and
returns a ``concurrent.futures.Future`` resolving to the call's
``Outcome``.
"""

from __future__ import annotations

__all__ = ["RequestFacade"]

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import TYPE_CHECKING, Any

from netfacade.core.config import FacadeConfig
from netfacade.core.http_logic import (
    create_client,
    execute_http_method,
    execute_upload,
    reject_invalid_url,
)
from netfacade.core.validation import validate_timeout

if TYPE_CHECKING:
    import os
    from collections.abc import Callable, Mapping
    from types import TracebackType
    from typing import Self

    import httpx

    from netfacade.callbacks import ErrorCallback, ProgressCallback, SuccessCallback
    from netfacade.outcome import Outcome

logger: logging.Logger = logging.getLogger(__name__)


class RequestFacade:
    r"""Non-blocking facade for POST, GET and multipart upload requests.

    Callbacks run on the worker thread that executed the request, except
    for the invalid URL error which is reported on the calling thread
    before anything is dispatched. An exception raised by a callback is
    stored in the returned future.

    If an ``httpx.Client`` is passed in, its lifecycle stays with the
    caller. Otherwise a client is created on entry and closed on exit.

    Args:
        config: Optional FacadeConfig. If ``None``, defaults are used.
        client: Optional httpx.Client to send requests with.
        timeout: Maximum seconds to wait for server responses. Only used
            when ``client`` is None. If None, the httpx default applies.
        max_workers: Maximum number of worker threads. If None, the
            ``ThreadPoolExecutor`` default is used.

    Example:
        ```pycon
        >>> from netfacade import RequestFacade
        >>> with RequestFacade() as facade:  # doctest: +SKIP
        ...     future = facade.send_get("https://api.example.com/data", on_success=print)
        ...     outcome = future.result()
        ...

        ```
    """

    def __init__(
        self,
        *,
        config: FacadeConfig | None = None,
        client: httpx.Client | None = None,
        timeout: float | httpx.Timeout | None = None,
        max_workers: int | None = None,
    ) -> None:
        validate_timeout(timeout)
        self._config = config if config is not None else FacadeConfig()
        self._timeout = timeout
        self._external_client = client
        self._max_workers = max_workers

        self._client: httpx.Client | None = None
        self._executor: ThreadPoolExecutor | None = None

    def __enter__(self) -> Self:
        """Create the worker pool, and the httpx client if none was given.

        Returns:
            The RequestFacade instance for making requests.
        """
        self._client = self._external_client or create_client(self._timeout)
        self._executor = ThreadPoolExecutor(
            max_workers=self._max_workers, thread_name_prefix="netfacade"
        )
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Wait for in-flight requests, then release the pool and the
        client if this facade created it."""
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
        if self._client is not None and self._external_client is None:
            self._client.close()
        self._client = None

    def _ensure_executor(self) -> ThreadPoolExecutor:
        if self._executor is None or self._client is None:
            msg = "RequestFacade must be used within a context manager (with statement)"
            raise RuntimeError(msg)
        return self._executor

    def _dispatch(
        self,
        url: str,
        method: str,
        on_error: ErrorCallback | None,
        func: Callable[..., Outcome],
        /,
        **kwargs: Any,
    ) -> Future[Outcome]:
        executor = self._ensure_executor()
        rejected = reject_invalid_url(url, method, on_error)
        if rejected is not None:
            future: Future[Outcome] = Future()
            future.set_result(rejected)
            return future
        logger.debug(f"Dispatching {method} request to {url}")
        return executor.submit(
            func,
            url=url,
            client=self._client,
            config=self._config,
            on_error=on_error,
            **kwargs,
        )

    def send_post(
        self,
        url: str,
        parameters: Mapping[str, Any] | None = None,
        *,
        on_success: SuccessCallback | None = None,
        on_error: ErrorCallback | None = None,
    ) -> Future[Outcome]:
        r"""Dispatch a POST request with url-encoded ``parameters``.

        Returns:
            A future resolving to the Outcome of the call.

        Raises:
            RuntimeError: If called outside of a context manager.
        """
        return self._dispatch(
            url,
            "POST",
            on_error,
            execute_http_method,
            method="POST",
            parameters=parameters,
            on_success=on_success,
        )

    def send_get(
        self,
        url: str,
        parameters: Mapping[str, Any] | None = None,
        *,
        on_success: SuccessCallback | None = None,
        on_error: ErrorCallback | None = None,
    ) -> Future[Outcome]:
        r"""Dispatch a GET request.

        Returns:
            A future resolving to the Outcome of the call.

        Raises:
            RuntimeError: If called outside of a context manager.
        """
        return self._dispatch(
            url,
            "GET",
            on_error,
            execute_http_method,
            method="GET",
            parameters=parameters,
            on_success=on_success,
        )

    def upload_image(
        self,
        url: str,
        file: str | os.PathLike[str],
        parameters: Mapping[str, Any] | None = None,
        *,
        on_success: SuccessCallback | None = None,
        on_progress: ProgressCallback | None = None,
        on_error: ErrorCallback | None = None,
    ) -> Future[Outcome]:
        r"""Dispatch a multipart upload of ``file``.

        Returns:
            A future resolving to the Outcome of the call.

        Raises:
            RuntimeError: If called outside of a context manager.
        """
        return self._dispatch(
            url,
            "POST",
            on_error,
            execute_upload,
            file=file,
            parameters=parameters,
            on_success=on_success,
            on_progress=on_progress,
        )
