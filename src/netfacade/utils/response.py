r"""HTTP response decoding utilities.

A successful facade call must yield a JSON object. Anything else is a
malformed response.
"""

from __future__ import annotations

__all__ = ["decode_json_object", "log_response"]

import json
import logging
import time
from typing import TYPE_CHECKING

from netfacade.exceptions import MalformedResponseError
from netfacade.utils.structured_logging import log_structured

if TYPE_CHECKING:
    import httpx

    from netfacade.callbacks import JsonObject

logger: logging.Logger = logging.getLogger(__name__)


def decode_json_object(response: httpx.Response, url: str, method: str) -> JsonObject:
    """Decode the response body into a JSON object.

    The HTTP status code is not inspected: an error status whose body is a
    JSON object is returned like any other.

    Args:
        response: The HTTP response to decode.
        url: The URL that was requested, used in error messages.
        method: The HTTP method name, used in error messages.

    Returns:
        The decoded mapping.

    Raises:
        MalformedResponseError: If the body is not valid JSON or its top
            level value is not an object.
    """
    try:
        payload = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.debug(f"{method} request to {url} returned a non-JSON body: {exc}")
        raise MalformedResponseError(
            f"{method} request to {url} returned a body that is not valid JSON",
            url=url,
            method=method,
            cause=exc,
            response=response,
        ) from exc

    if not isinstance(payload, dict):
        logger.debug(
            f"{method} request to {url} returned a JSON {type(payload).__name__} "
            "instead of an object"
        )
        raise MalformedResponseError(
            f"{method} request to {url} returned a JSON {type(payload).__name__} "
            "instead of an object",
            url=url,
            method=method,
            response=response,
        )
    return payload


def log_response(response: httpx.Response, url: str, method: str, start_time: float) -> None:
    """Log the completion of a request with structured fields."""
    log_structured(
        logger,
        logging.DEBUG,
        f"{method} request to {url} completed with status {response.status_code}",
        url=url,
        method=method,
        status_code=response.status_code,
        elapsed=time.time() - start_time,
    )
