r"""Unit tests for send_post_async, send_get_async and
upload_image_async."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, Mock, patch

import httpx
import pytest

from netfacade import (
    EncodingError,
    InvalidURLError,
    MalformedResponseError,
    Outcome,
    TransportError,
    send_get_async,
    send_post_async,
    upload_image_async,
)
from tests.helpers import TEST_URL, create_consuming_async_post, create_mock_response

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable
    from pathlib import Path

OPERATIONS_ASYNC = [
    pytest.param(send_post_async, "POST", id="POST"),
    pytest.param(send_get_async, "GET", id="GET"),
]


########################################################
#     Tests for send_post_async and send_get_async     #
########################################################


@pytest.mark.asyncio
@pytest.mark.parametrize(("operation", "method"), OPERATIONS_ASYNC)
async def test_async_success(
    operation: Callable[..., Awaitable[Outcome]],
    method: str,
    mock_async_client: httpx.AsyncClient,
) -> None:
    on_success, on_error = Mock(), Mock()
    outcome = await operation(
        TEST_URL, {"a": 1}, client=mock_async_client, on_success=on_success, on_error=on_error
    )
    assert outcome.unwrap() == {"a": 1}
    on_success.assert_called_once_with({"a": 1})
    on_error.assert_not_called()
    assert mock_async_client.request.call_args.args == (method, TEST_URL)


@pytest.mark.asyncio
@pytest.mark.parametrize(("operation", "method"), OPERATIONS_ASYNC)
async def test_async_invalid_url(
    operation: Callable[..., Awaitable[Outcome]],
    method: str,
    mock_async_client: httpx.AsyncClient,
) -> None:
    on_error = Mock()
    await operation("bad url", client=mock_async_client, on_error=on_error)
    error = on_error.call_args.args[0]
    assert isinstance(error, InvalidURLError)
    assert error.code == 404
    mock_async_client.request.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize(("operation", "method"), OPERATIONS_ASYNC)
async def test_async_non_object_body(
    operation: Callable[..., Awaitable[Outcome]],
    method: str,
    mock_async_client: httpx.AsyncClient,
) -> None:
    mock_async_client.request = AsyncMock(return_value=create_mock_response(json_data=[1]))
    on_success, on_error = Mock(), Mock()
    await operation(TEST_URL, client=mock_async_client, on_success=on_success, on_error=on_error)
    assert isinstance(on_error.call_args.args[0], MalformedResponseError)
    on_success.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize(("operation", "method"), OPERATIONS_ASYNC)
async def test_async_transport_error(
    operation: Callable[..., Awaitable[Outcome]],
    method: str,
    mock_async_client: httpx.AsyncClient,
) -> None:
    mock_async_client.request = AsyncMock(side_effect=httpx.ReadTimeout("timed out"))
    on_error = Mock()
    outcome = await operation(TEST_URL, client=mock_async_client, on_error=on_error)
    assert isinstance(outcome.error, TransportError)
    on_error.assert_called_once_with(outcome.error)


@pytest.mark.asyncio
@pytest.mark.parametrize(("operation", "method"), OPERATIONS_ASYNC)
async def test_async_owned_client_closed(
    operation: Callable[..., Awaitable[Outcome]],
    method: str,
    mock_async_client: httpx.AsyncClient,
) -> None:
    with patch("httpx.AsyncClient", return_value=mock_async_client) as client_class:
        await operation(TEST_URL, timeout=5.0)
    client_class.assert_called_once_with(timeout=5.0)
    mock_async_client.aclose.assert_awaited_once()


########################################
#     Tests for upload_image_async     #
########################################


@pytest.mark.asyncio
async def test_upload_image_async_success(
    mock_async_client: httpx.AsyncClient, mock_response: httpx.Response, image_file: Path
) -> None:
    mock_async_client.post = create_consuming_async_post(mock_response, [])
    on_success, on_progress = Mock(), Mock()
    outcome = await upload_image_async(
        TEST_URL,
        image_file,
        client=mock_async_client,
        on_success=on_success,
        on_progress=on_progress,
    )
    assert outcome.is_success
    on_success.assert_called_once_with({"a": 1})
    assert on_progress.call_args_list[-1].args == (1.0,)


@pytest.mark.asyncio
async def test_upload_image_async_missing_file(
    mock_async_client: httpx.AsyncClient, tmp_path: Path
) -> None:
    on_error = Mock()
    await upload_image_async(
        TEST_URL, tmp_path / "missing.png", client=mock_async_client, on_error=on_error
    )
    assert isinstance(on_error.call_args.args[0], EncodingError)
    mock_async_client.post.assert_not_called()


@pytest.mark.asyncio
async def test_upload_image_async_invalid_url(
    mock_async_client: httpx.AsyncClient, image_file: Path
) -> None:
    on_error = Mock()
    outcome = await upload_image_async("", image_file, client=mock_async_client, on_error=on_error)
    assert isinstance(outcome.error, InvalidURLError)
    on_error.assert_called_once_with(outcome.error)
