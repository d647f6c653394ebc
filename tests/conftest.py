from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, Mock

import httpx
import pytest

from tests.helpers import PNG_BYTES, create_mock_response

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def mock_response() -> httpx.Response:
    """Create a mock httpx.Response whose body is a JSON object."""
    return create_mock_response(json_data={"a": 1})


@pytest.fixture
def mock_client(mock_response: httpx.Response) -> httpx.Client:
    """Create a mock httpx.Client returning ``mock_response``."""
    return Mock(
        spec=httpx.Client,
        request=Mock(return_value=mock_response),
        post=Mock(return_value=mock_response),
    )


@pytest.fixture
def mock_async_client(mock_response: httpx.Response) -> httpx.AsyncClient:
    """Create a mock httpx.AsyncClient returning ``mock_response``."""
    return Mock(
        spec=httpx.AsyncClient,
        request=AsyncMock(return_value=mock_response),
        post=AsyncMock(return_value=mock_response),
        aclose=AsyncMock(),
    )


@pytest.fixture
def mock_callback() -> Mock:
    """Create a mock callback function for testing callbacks.

    Example:
        >>> def test_callback(mock_callback):
        ...     send_get(url, on_success=mock_callback)
        ...     mock_callback.assert_called_once()
    """
    return Mock()


@pytest.fixture
def image_file(tmp_path: Path) -> Path:
    """Write a small PNG-looking file and return its path."""
    path = tmp_path.joinpath("photo.png")
    path.write_bytes(PNG_BYTES)
    return path
