from __future__ import annotations

import logging
from typing import Any

import httpx
import pytest

from netfacade.exceptions import MalformedResponseError
from netfacade.utils.response import decode_json_object, log_response
from tests.helpers import TEST_URL, create_mock_response

########################################
#     Tests for decode_json_object     #
########################################


@pytest.mark.parametrize("payload", [{"a": 1}, {}, {"nested": {"list": [1, 2]}}])
def test_decode_json_object(payload: dict[str, Any]) -> None:
    response = create_mock_response(json_data=payload)
    assert decode_json_object(response, TEST_URL, "GET") == payload


def test_decode_json_object_error_status_with_object_body() -> None:
    response = httpx.Response(500, json={"error": "internal"})
    assert decode_json_object(response, TEST_URL, "POST") == {"error": "internal"}


@pytest.mark.parametrize("payload", [[1, 2, 3], "text", 42, None, True])
def test_decode_json_object_not_an_object(payload: Any) -> None:
    response = create_mock_response(json_data=payload)
    with pytest.raises(MalformedResponseError, match=r"instead of an object") as exc_info:
        decode_json_object(response, TEST_URL, "GET")
    error = exc_info.value
    assert error.code == 1
    assert error.domain == "Results returned by server illegitimate"
    assert error.response is response
    assert error.url == TEST_URL
    assert error.method == "GET"


def test_decode_json_object_invalid_json() -> None:
    response = create_mock_response(invalid_json=True)
    with pytest.raises(MalformedResponseError, match=r"not valid JSON") as exc_info:
        decode_json_object(response, TEST_URL, "POST")
    assert exc_info.value.cause is not None


def test_decode_json_object_empty_body() -> None:
    response = httpx.Response(204)
    with pytest.raises(MalformedResponseError, match=r"not valid JSON"):
        decode_json_object(response, TEST_URL, "POST")


##################################
#     Tests for log_response     #
##################################


def test_log_response(caplog: pytest.LogCaptureFixture) -> None:
    response = httpx.Response(201, json={})
    with caplog.at_level(logging.DEBUG, logger="netfacade"):
        log_response(response, TEST_URL, "POST", start_time=0.0)
    record = caplog.records[-1]
    assert record.getMessage() == f"POST request to {TEST_URL} completed with status 201"
    assert record.status_code == 201
    assert record.method == "POST"
    assert record.url == TEST_URL
    assert record.elapsed > 0
