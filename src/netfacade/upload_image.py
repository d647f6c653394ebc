r"""Contains the synchronous multipart image upload operation reporting
through callbacks."""

from __future__ import annotations

__all__ = ["upload_image"]

from typing import TYPE_CHECKING, Any

from netfacade.core.http_logic import execute_upload

if TYPE_CHECKING:
    import os
    from collections.abc import Mapping

    import httpx

    from netfacade.callbacks import ErrorCallback, ProgressCallback, SuccessCallback
    from netfacade.core.config import FacadeConfig
    from netfacade.outcome import Outcome


def upload_image(
    url: str,
    file: str | os.PathLike[str],
    parameters: Mapping[str, Any] | None = None,
    *,
    on_success: SuccessCallback | None = None,
    on_progress: ProgressCallback | None = None,
    on_error: ErrorCallback | None = None,
    client: httpx.Client | None = None,
    config: FacadeConfig | None = None,
    timeout: float | httpx.Timeout | None = None,
) -> Outcome:
    r"""Upload a file as a multipart form and report the decoded JSON
    object.

    The file is sent in a single part named ``"file"`` (see
    ``FacadeConfig.upload_field_name``). ``on_progress`` is invoked with
    the uploaded fraction after each streamed chunk, the last value being
    1.0. Then exactly one of ``on_success`` and ``on_error`` is invoked.

    Args:
        url: The absolute URL to upload to.
        file: The path or ``file://`` URI of the file to upload.
        parameters: Optional extra form fields. Ignored when
            ``config.attach_upload_parameters`` is False.
        on_success: Optional callback receiving the decoded JSON object.
        on_progress: Optional callback receiving the uploaded fraction.
        on_error: Optional callback receiving the NetworkError. A file that
            cannot be read is reported as an ``EncodingError``.
        client: An optional httpx.Client object to use for making requests.
            If None, a new client will be created and closed after use.
        config: An optional FacadeConfig object. If None, defaults are used.
        timeout: Maximum seconds to wait for the server response.
            Only used if client is None. If None, the httpx default applies.

    Returns:
        The Outcome reported to the callbacks.

    Example:
        ```pycon
        >>> from netfacade import upload_image
        >>> outcome = upload_image(
        ...     "https://api.example.com/images",
        ...     "photo.png",
        ...     on_progress=lambda fraction: print(f"{fraction:.0%}"),
        ... )  # doctest: +SKIP

        ```
    """
    return execute_upload(
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
