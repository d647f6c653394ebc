r"""Shared test helpers for the facade tests.

This module contains mock builders used across the unit and
integration tests.
"""

from __future__ import annotations

__all__ = [
    "PNG_BYTES",
    "TEST_URL",
    "create_consuming_async_post",
    "create_consuming_post",
    "create_mock_response",
    "create_mock_transport",
]

import json
from typing import TYPE_CHECKING, Any
from unittest.mock import AsyncMock, Mock

import httpx

if TYPE_CHECKING:
    from collections.abc import Callable

TEST_URL = "https://api.example.com/data"
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + bytes(range(256)) * 4


def create_mock_response(
    status_code: int = 200,
    json_data: Any = None,
    invalid_json: bool = False,
) -> Mock:
    """Create a mock httpx.Response.

    Args:
        status_code: The status code of the response.
        json_data: The value returned by ``response.json()``.
        invalid_json: If True, ``response.json()`` raises a
            JSONDecodeError.

    Returns:
        The mock response.
    """
    if invalid_json:
        json_mock = Mock(side_effect=json.JSONDecodeError("Expecting value", "<html>", 0))
    else:
        json_mock = Mock(return_value=json_data)
    return Mock(spec=httpx.Response, status_code=status_code, json=json_mock)


def create_consuming_post(response: Mock, sink: list[bytes]) -> Mock:
    """Create a mock ``post`` method that drains the streamed content into
    ``sink``, like a real transport would."""

    def post(url: str, *, content: Any, headers: dict[str, str]) -> Mock:
        sink.extend(content)
        return response

    return Mock(side_effect=post)


def create_consuming_async_post(response: Mock, sink: list[bytes]) -> AsyncMock:
    """Async version of ``create_consuming_post``."""

    async def post(url: str, *, content: Any, headers: dict[str, str]) -> Mock:
        sink.extend([chunk async for chunk in content])
        return response

    return AsyncMock(side_effect=post)


def create_mock_transport(
    handler: Callable[[httpx.Request], httpx.Response] | None = None,
    json_data: Any = None,
) -> httpx.MockTransport:
    """Create an httpx.MockTransport.

    Args:
        handler: The request handler. If None, every request gets a 200
            response with ``json_data`` as JSON body.
        json_data: The JSON body used by the default handler.
    """
    if handler is None:

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=json_data if json_data is not None else {"a": 1})

    return httpx.MockTransport(handler)
