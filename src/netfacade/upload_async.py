r"""Contains the asynchronous multipart upload function with progress
reporting."""

from __future__ import annotations

__all__ = ["upload_async"]

import asyncio
import logging
import time
from typing import TYPE_CHECKING, Any

import httpx

from netfacade.core.config import FacadeConfig
from netfacade.core.validation import validate_url
from netfacade.upload import build_upload_body
from netfacade.utils import (
    aiter_with_progress,
    decode_json_object,
    log_response,
    wrap_transport_error,
)

if TYPE_CHECKING:
    import os
    from collections.abc import Mapping

    from netfacade.callbacks import JsonObject, ProgressCallback

logger: logging.Logger = logging.getLogger(__name__)


async def upload_async(
    url: str,
    file: str | os.PathLike[str],
    *,
    client: httpx.AsyncClient,
    parameters: Mapping[str, Any] | None = None,
    config: FacadeConfig | None = None,
    on_progress: ProgressCallback | None = None,
) -> JsonObject:
    r"""Async version of ``upload``.

    The file is read and the body encoded in a worker thread, so the event
    loop is not blocked. Encoding failures are raised before any network
    activity.
    """
    validate_url(url, "POST")
    config = config or FacadeConfig()
    body = await asyncio.to_thread(build_upload_body, url, file, parameters, config)

    logger.debug(f"Uploading {file} to {url} ({len(body.content)} bytes)")
    start_time = time.time()
    try:
        response = await client.post(
            url,
            content=aiter_with_progress(
                body.content, chunk_size=config.chunk_size, on_progress=on_progress
            ),
            headers=body.headers,
        )
    except httpx.RequestError as exc:
        raise wrap_transport_error(exc, url=url, method="POST") from exc

    log_response(response, url=url, method="POST", start_time=start_time)
    return decode_json_object(response, url=url, method="POST")
