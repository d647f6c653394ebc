r"""Contains the synchronous request function returning the decoded JSON
object or raising ``NetworkError``."""

from __future__ import annotations

__all__ = ["build_request_kwargs", "prepare_request_kwargs", "request"]

import logging
import time
from typing import TYPE_CHECKING, Any

import httpx

from netfacade.core.config import FORM_CONTENT_TYPE, FacadeConfig
from netfacade.core.validation import validate_url
from netfacade.utils import (
    decode_json_object,
    encode_form_body,
    encode_parameters,
    log_response,
    text_pairs,
    wrap_encoding_error,
    wrap_transport_error,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from netfacade.callbacks import JsonObject

logger: logging.Logger = logging.getLogger(__name__)


def prepare_request_kwargs(
    method: str,
    parameters: Mapping[str, Any] | None,
    config: FacadeConfig,
) -> dict[str, Any]:
    """Build the httpx keyword arguments carrying ``parameters``.

    GET parameters go to the query string unless
    ``config.get_parameters_in_body`` is set. Every other method sends them
    as an url-encoded form body. Without parameters no body is sent.

    Raises:
        UnicodeDecodeError: If a ``bytes`` value sent in the query string
            is not valid UTF-8.

    Example:
        ```pycon
        >>> from netfacade.core.config import FacadeConfig
        >>> from netfacade.request import prepare_request_kwargs
        >>> prepare_request_kwargs("GET", {"q": "cat"}, FacadeConfig())
        {'params': [('q', 'cat')]}
        >>> prepare_request_kwargs("POST", {"q": "cat"}, FacadeConfig())["content"]
        b'q=cat'

        ```
    """
    pairs = encode_parameters(parameters)
    if not pairs:
        return {}
    if method.upper() == "GET" and not config.get_parameters_in_body:
        return {"params": text_pairs(pairs)}
    return {"content": encode_form_body(pairs), "headers": {"Content-Type": FORM_CONTENT_TYPE}}


def build_request_kwargs(
    url: str,
    method: str,
    parameters: Mapping[str, Any] | None,
    config: FacadeConfig,
) -> dict[str, Any]:
    """Same as ``prepare_request_kwargs`` but reports encoding failures as
    ``EncodingError``.
    """
    try:
        return prepare_request_kwargs(method, parameters, config)
    except (TypeError, ValueError) as exc:
        raise wrap_encoding_error(exc, url=url, method=method) from exc


def request(
    url: str,
    method: str,
    *,
    client: httpx.Client,
    parameters: Mapping[str, Any] | None = None,
    config: FacadeConfig | None = None,
) -> JsonObject:
    r"""Send an HTTP request and decode its JSON object body.

    Args:
        url: The absolute URL to send the request to.
        method: The HTTP method (e.g. ``"GET"``, ``"POST"``).
        client: The httpx.Client used to send the request.
        parameters: Optional request parameters.
        config: Optional FacadeConfig. If None, defaults are used.

    Returns:
        The decoded JSON object.

    Raises:
        InvalidURLError: If ``url`` is not a valid absolute URL. Raised
            before any network activity.
        EncodingError: If the parameters cannot be encoded. No request is
            sent.
        TransportError: If httpx fails to complete the exchange.
        MalformedResponseError: If the body is not a JSON object.

    Example:
        ```pycon
        >>> import httpx
        >>> from netfacade.request import request
        >>> with httpx.Client() as client:  # doctest: +SKIP
        ...     data = request("https://httpbin.org/get", "GET", client=client)
        ...

        ```
    """
    validate_url(url, method)
    config = config or FacadeConfig()
    kwargs = build_request_kwargs(url, method, parameters, config)

    logger.debug(f"Sending {method} request to {url}")
    start_time = time.time()
    try:
        response = client.request(method, url, **kwargs)
    except httpx.RequestError as exc:
        raise wrap_transport_error(exc, url=url, method=method) from exc

    log_response(response, url=url, method=method, start_time=start_time)
    return decode_json_object(response, url=url, method=method)
