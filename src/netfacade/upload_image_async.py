r"""Contains the asynchronous multipart image upload operation reporting
through callbacks."""

from __future__ import annotations

__all__ = ["upload_image_async"]

from typing import TYPE_CHECKING, Any

from netfacade.core.http_logic import execute_upload_async

if TYPE_CHECKING:
    import os
    from collections.abc import Mapping

    import httpx

    from netfacade.callbacks import ErrorCallback, ProgressCallback, SuccessCallback
    from netfacade.core.config import FacadeConfig
    from netfacade.outcome import Outcome


async def upload_image_async(
    url: str,
    file: str | os.PathLike[str],
    parameters: Mapping[str, Any] | None = None,
    *,
    on_success: SuccessCallback | None = None,
    on_progress: ProgressCallback | None = None,
    on_error: ErrorCallback | None = None,
    client: httpx.AsyncClient | None = None,
    config: FacadeConfig | None = None,
    timeout: float | httpx.Timeout | None = None,
) -> Outcome:
    r"""Async version of ``upload_image``.

    Example:
        ```pycon
        >>> from netfacade import upload_image_async
        >>> outcome = await upload_image_async(
        ...     "https://api.example.com/images", "photo.png", on_progress=print
        ... )  # doctest: +SKIP

        ```
    """
    return await execute_upload_async(
        url=url,
        file=file,
        parameters=parameters,
        client=client,
        config=config,
        timeout=timeout,
        on_success=on_success,
        on_progress=on_progress,
        on_error=on_error,
    )
