r"""Contains the asynchronous request function returning the decoded JSON
object or raising ``NetworkError``."""

from __future__ import annotations

__all__ = ["request_async"]

import logging
import time
from typing import TYPE_CHECKING, Any

import httpx

from netfacade.core.config import FacadeConfig
from netfacade.core.validation import validate_url
from netfacade.request import build_request_kwargs
from netfacade.utils import decode_json_object, log_response, wrap_transport_error

if TYPE_CHECKING:
    from collections.abc import Mapping

    from netfacade.callbacks import JsonObject

logger: logging.Logger = logging.getLogger(__name__)


async def request_async(
    url: str,
    method: str,
    *,
    client: httpx.AsyncClient,
    parameters: Mapping[str, Any] | None = None,
    config: FacadeConfig | None = None,
) -> JsonObject:
    r"""Send an async HTTP request and decode its JSON object body.

    Args:
        url: The absolute URL to send the request to.
        method: The HTTP method (e.g. ``"GET"``, ``"POST"``).
        client: The httpx.AsyncClient used to send the request.
        parameters: Optional request parameters.
        config: Optional FacadeConfig. If None, defaults are used.

    Returns:
        The decoded JSON object.

    Raises:
        InvalidURLError: If ``url`` is not a valid absolute URL.
        EncodingError: If the parameters cannot be encoded.
        TransportError: If httpx fails to complete the exchange.
        MalformedResponseError: If the body is not a JSON object.
    """
    validate_url(url, method)
    config = config or FacadeConfig()
    kwargs = build_request_kwargs(url, method, parameters, config)

    logger.debug(f"Sending {method} request to {url}")
    start_time = time.time()
    try:
        response = await client.request(method, url, **kwargs)
    except httpx.RequestError as exc:
        raise wrap_transport_error(exc, url=url, method=method) from exc

    log_response(response, url=url, method=method, start_time=start_time)
    return decode_json_object(response, url=url, method=method)
