from __future__ import annotations

from unittest.mock import Mock

import pytest

from netfacade.callbacks import invoke_on_error, invoke_on_progress, invoke_on_success
from netfacade.exceptions import TransportError

#######################################
#     Tests for invoke_on_success     #
#######################################


def test_invoke_on_success(mock_callback: Mock) -> None:
    invoke_on_success(mock_callback, {"a": 1})
    mock_callback.assert_called_once_with({"a": 1})


def test_invoke_on_success_none() -> None:
    invoke_on_success(None, {"a": 1})


#####################################
#     Tests for invoke_on_error     #
#####################################


def test_invoke_on_error(mock_callback: Mock) -> None:
    error = TransportError("failed")
    invoke_on_error(mock_callback, error)
    mock_callback.assert_called_once_with(error)


def test_invoke_on_error_none() -> None:
    invoke_on_error(None, TransportError("failed"))


########################################
#     Tests for invoke_on_progress     #
########################################


@pytest.mark.parametrize(
    ("completed", "total", "expected"),
    [(0, 100, 0.0), (25, 100, 0.25), (100, 100, 1.0), (0, 0, 1.0), (150, 100, 1.0)],
)
def test_invoke_on_progress(
    mock_callback: Mock, completed: int, total: int, expected: float
) -> None:
    invoke_on_progress(mock_callback, completed=completed, total=total)
    mock_callback.assert_called_once_with(expected)


def test_invoke_on_progress_none() -> None:
    invoke_on_progress(None, completed=1, total=2)
