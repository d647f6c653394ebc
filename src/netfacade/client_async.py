r"""Asynchronous context manager for facade calls.

``AsyncRequestFacade`` owns an ``httpx.AsyncClient``. Its methods are
coroutines; wrap them in ``asyncio.create_task`` to dispatch several
requests concurrently.
"""

from __future__ import annotations

__all__ = ["AsyncRequestFacade"]

from typing import TYPE_CHECKING, Any

from netfacade.core.config import FacadeConfig
from netfacade.core.http_logic import (
    create_async_client,
    execute_http_method_async,
    execute_upload_async,
)
from netfacade.core.validation import validate_timeout

if TYPE_CHECKING:
    import os
    from collections.abc import Mapping
    from types import TracebackType
    from typing import Self

    import httpx

    from netfacade.callbacks import ErrorCallback, ProgressCallback, SuccessCallback
    from netfacade.outcome import Outcome


class AsyncRequestFacade:
    r"""Asynchronous facade for POST, GET and multipart upload requests.

    Callbacks run on the event loop. If an ``httpx.AsyncClient`` is passed
    in, its lifecycle stays with the caller.

    Args:
        config: Optional FacadeConfig. If ``None``, defaults are used.
        client: Optional httpx.AsyncClient to send requests with.
        timeout: Maximum seconds to wait for server responses. Only used
            when ``client`` is None. If None, the httpx default applies.

    Example:
        ```pycon
        >>> import asyncio
        >>> from netfacade import AsyncRequestFacade
        >>> async def main():  # doctest: +SKIP
        ...     async with AsyncRequestFacade() as facade:
        ...         outcomes = await asyncio.gather(
        ...             facade.send_get("https://api.example.com/a"),
        ...             facade.send_post("https://api.example.com/b", {"key": "value"}),
        ...         )
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

        ```
    """

    def __init__(
        self,
        *,
        config: FacadeConfig | None = None,
        client: httpx.AsyncClient | None = None,
        timeout: float | httpx.Timeout | None = None,
    ) -> None:
        validate_timeout(timeout)
        self._config = config if config is not None else FacadeConfig()
        self._timeout = timeout
        self._external_client = client

        self._client: httpx.AsyncClient | None = None
        self._entered = False

    async def __aenter__(self) -> Self:
        self._client = self._external_client or create_async_client(self._timeout)
        self._entered = True
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._client is not None and self._external_client is None:
            await self._client.aclose()
        self._client = None
        self._entered = False

    def _ensure_client(self) -> httpx.AsyncClient:
        """Ensure the client is available for use.

        Raises:
            RuntimeError: If the facade is used outside of a context manager.
        """
        if not self._entered or self._client is None:
            msg = "AsyncRequestFacade must be used within an async context manager (async with statement)"
            raise RuntimeError(msg)
        return self._client

    async def send_post(
        self,
        url: str,
        parameters: Mapping[str, Any] | None = None,
        *,
        on_success: SuccessCallback | None = None,
        on_error: ErrorCallback | None = None,
    ) -> Outcome:
        r"""Send a POST request with url-encoded ``parameters``."""
        return await execute_http_method_async(
            url,
            "POST",
            parameters=parameters,
            client=self._ensure_client(),
            config=self._config,
            on_success=on_success,
            on_error=on_error,
        )

    async def send_get(
        self,
        url: str,
        parameters: Mapping[str, Any] | None = None,
        *,
        on_success: SuccessCallback | None = None,
        on_error: ErrorCallback | None = None,
    ) -> Outcome:
        r"""Send a GET request."""
        return await execute_http_method_async(
            url,
            "GET",
            parameters=parameters,
            client=self._ensure_client(),
            config=self._config,
            on_success=on_success,
            on_error=on_error,
        )

    async def upload_image(
        self,
        url: str,
        file: str | os.PathLike[str],
        parameters: Mapping[str, Any] | None = None,
        *,
        on_success: SuccessCallback | None = None,
        on_progress: ProgressCallback | None = None,
        on_error: ErrorCallback | None = None,
    ) -> Outcome:
        r"""Upload ``file`` as a multipart form."""
        return await execute_upload_async(
            url,
            file,
            parameters=parameters,
            client=self._ensure_client(),
            config=self._config,
            on_success=on_success,
            on_progress=on_progress,
            on_error=on_error,
        )
