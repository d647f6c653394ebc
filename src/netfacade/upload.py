r"""Contains the synchronous multipart upload function with progress
reporting."""

from __future__ import annotations

__all__ = ["build_upload_body", "upload"]

import logging
import time
from typing import TYPE_CHECKING, Any

import httpx

from netfacade.core.config import FacadeConfig
from netfacade.core.validation import validate_url
from netfacade.utils import (
    MultipartBody,
    build_multipart_body,
    decode_json_object,
    encode_parameters,
    iter_with_progress,
    log_response,
    wrap_encoding_error,
    wrap_transport_error,
)

if TYPE_CHECKING:
    import os
    from collections.abc import Mapping

    from netfacade.callbacks import JsonObject, ProgressCallback

logger: logging.Logger = logging.getLogger(__name__)


def build_upload_body(
    url: str,
    file: str | os.PathLike[str],
    parameters: Mapping[str, Any] | None,
    config: FacadeConfig,
) -> MultipartBody:
    """Encode the multipart body of an upload according to ``config``.

    Raises:
        EncodingError: If the parameters or the file cannot be encoded.
    """
    fields = None
    if config.attach_upload_parameters:
        try:
            fields = encode_parameters(parameters)
        except (TypeError, ValueError) as exc:
            raise wrap_encoding_error(exc, url=url, method="POST") from exc
    return build_multipart_body(url, file, field_name=config.upload_field_name, fields=fields)


def upload(
    url: str,
    file: str | os.PathLike[str],
    *,
    client: httpx.Client,
    parameters: Mapping[str, Any] | None = None,
    config: FacadeConfig | None = None,
    on_progress: ProgressCallback | None = None,
) -> JsonObject:
    r"""Upload ``file`` as a multipart POST and decode the JSON object
    body.

    The body is streamed in ``config.chunk_size`` chunks and
    ``on_progress`` receives the fraction sent after each chunk, ending
    with 1.0.

    Args:
        url: The absolute URL to upload to.
        file: The path or ``file://`` URI of the file to upload.
        client: The httpx.Client used to send the request.
        parameters: Optional extra form fields.
        config: Optional FacadeConfig. If None, defaults are used.
        on_progress: Optional callback receiving the progress fraction.

    Returns:
        The decoded JSON object.

    Raises:
        InvalidURLError: If ``url`` is not a valid absolute URL.
        EncodingError: If the body cannot be built. No request is sent.
        TransportError: If httpx fails to complete the exchange.
        MalformedResponseError: If the body is not a JSON object.

    Example:
        ```pycon
        >>> import httpx
        >>> from netfacade.upload import upload
        >>> with httpx.Client() as client:  # doctest: +SKIP
        ...     data = upload("https://httpbin.org/post", "photo.png", client=client, on_progress=print)
        ...

        ```
    """
    validate_url(url, "POST")
    config = config or FacadeConfig()
    body = build_upload_body(url, file, parameters, config)

    logger.debug(f"Uploading {file} to {url} ({len(body.content)} bytes)")
    start_time = time.time()
    try:
        response = client.post(
            url,
            content=iter_with_progress(
                body.content, chunk_size=config.chunk_size, on_progress=on_progress
            ),
            headers=body.headers,
        )
    except httpx.RequestError as exc:
        raise wrap_transport_error(exc, url=url, method="POST") from exc

    log_response(response, url=url, method="POST", start_time=start_time)
    return decode_json_object(response, url=url, method="POST")
