r"""Unit tests for the request function and its parameter encoding."""

from __future__ import annotations

from unittest.mock import Mock

import httpx
import pytest

from netfacade import (
    EncodingError,
    FacadeConfig,
    InvalidURLError,
    MalformedResponseError,
    TransportError,
    request,
)
from netfacade.core.config import FORM_CONTENT_TYPE
from netfacade.request import prepare_request_kwargs
from tests.helpers import TEST_URL, create_mock_response

############################################
#     Tests for prepare_request_kwargs     #
############################################


@pytest.mark.parametrize("method", ["GET", "POST"])
def test_prepare_request_kwargs_no_parameters(method: str) -> None:
    assert prepare_request_kwargs(method, None, FacadeConfig()) == {}
    assert prepare_request_kwargs(method, {}, FacadeConfig()) == {}


def test_prepare_request_kwargs_get_query_string() -> None:
    assert prepare_request_kwargs("GET", {"q": "cat", "page": 2}, FacadeConfig()) == {
        "params": [("page", "2"), ("q", "cat")]
    }


def test_prepare_request_kwargs_get_in_body() -> None:
    config = FacadeConfig(get_parameters_in_body=True)
    assert prepare_request_kwargs("get", {"q": "cat"}, config) == {
        "content": b"q=cat",
        "headers": {"Content-Type": FORM_CONTENT_TYPE},
    }


def test_prepare_request_kwargs_post_body() -> None:
    assert prepare_request_kwargs("POST", {"user": "ada", "admin": True}, FacadeConfig()) == {
        "content": b"admin=1&user=ada",
        "headers": {"Content-Type": FORM_CONTENT_TYPE},
    }


#############################
#     Tests for request     #
#############################


def test_request_post_success(mock_client: httpx.Client) -> None:
    assert request(TEST_URL, "POST", client=mock_client, parameters={"a": 1}) == {"a": 1}
    mock_client.request.assert_called_once_with(
        "POST",
        TEST_URL,
        content=b"a=1",
        headers={"Content-Type": FORM_CONTENT_TYPE},
    )


def test_request_get_success(mock_client: httpx.Client) -> None:
    assert request(TEST_URL, "GET", client=mock_client, parameters={"a": 1}) == {"a": 1}
    mock_client.request.assert_called_once_with("GET", TEST_URL, params=[("a", "1")])


def test_request_without_parameters(mock_client: httpx.Client) -> None:
    request(TEST_URL, "POST", client=mock_client)
    mock_client.request.assert_called_once_with("POST", TEST_URL)


def test_request_invalid_url_no_network(mock_client: httpx.Client) -> None:
    with pytest.raises(InvalidURLError, match=r"Invalid URL"):
        request("not a url", "POST", client=mock_client)
    mock_client.request.assert_not_called()


@pytest.mark.parametrize(
    "exc",
    [
        httpx.ConnectError("Connection refused"),
        httpx.ConnectTimeout("Timed out"),
        httpx.ReadTimeout("Timed out"),
    ],
)
def test_request_transport_error(mock_client: httpx.Client, exc: httpx.RequestError) -> None:
    mock_client.request = Mock(side_effect=exc)
    with pytest.raises(TransportError) as exc_info:
        request(TEST_URL, "GET", client=mock_client)
    assert exc_info.value.__cause__ is exc
    assert exc_info.value.cause is exc


@pytest.mark.parametrize("payload", [[1, 2, 3], 42, "ok"])
def test_request_non_object_body(mock_client: httpx.Client, payload: object) -> None:
    mock_client.request = Mock(return_value=create_mock_response(json_data=payload))
    with pytest.raises(MalformedResponseError) as exc_info:
        request(TEST_URL, "POST", client=mock_client)
    assert exc_info.value.code == 1


def test_request_error_status_with_object_body(mock_client: httpx.Client) -> None:
    mock_client.request = Mock(
        return_value=create_mock_response(status_code=500, json_data={"error": "down"})
    )
    assert request(TEST_URL, "GET", client=mock_client) == {"error": "down"}


def test_prepare_request_kwargs_post_keeps_bytes() -> None:
    assert prepare_request_kwargs("POST", {"raw": b"\xff"}, FacadeConfig())["content"] == (
        b"raw=%FF"
    )


def test_request_non_utf8_query_raises_encoding_error(mock_client: httpx.Client) -> None:
    with pytest.raises(EncodingError, match=r"Cannot encode GET parameters") as exc_info:
        request(TEST_URL, "GET", client=mock_client, parameters={"raw": b"\xff"})
    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)
    mock_client.request.assert_not_called()
