from __future__ import annotations

from unittest.mock import Mock

import pytest

from netfacade.exceptions import InvalidURLError, MalformedResponseError
from netfacade.outcome import Outcome, resolve

#############################
#     Tests for Outcome     #
#############################


def test_outcome_success() -> None:
    outcome = Outcome.success({"a": 1})
    assert outcome.is_success
    assert outcome.value == {"a": 1}
    assert outcome.error is None
    assert outcome.unwrap() == {"a": 1}


def test_outcome_success_empty_object() -> None:
    outcome = Outcome.success({})
    assert outcome.is_success
    assert outcome.unwrap() == {}


def test_outcome_failure() -> None:
    error = MalformedResponseError("bad body")
    outcome = Outcome.failure(error)
    assert not outcome.is_success
    assert outcome.value is None
    assert outcome.error is error


def test_outcome_failure_unwrap_raises() -> None:
    outcome = Outcome.failure(MalformedResponseError("bad body"))
    with pytest.raises(MalformedResponseError, match=r"bad body"):
        outcome.unwrap()


def test_outcome_requires_exactly_one_field() -> None:
    with pytest.raises(ValueError, match=r"exactly one of value or error"):
        Outcome()
    with pytest.raises(ValueError, match=r"exactly one of value or error"):
        Outcome(value={"a": 1}, error=InvalidURLError("bad"))


def test_outcome_is_frozen() -> None:
    outcome = Outcome.success({"a": 1})
    with pytest.raises(AttributeError):
        outcome.value = {"b": 2}  # type: ignore[misc]


#############################
#     Tests for resolve     #
#############################


def test_resolve_success_fires_only_on_success() -> None:
    on_success, on_error = Mock(), Mock()
    outcome = Outcome.success({"a": 1})
    assert resolve(outcome, on_success=on_success, on_error=on_error) is outcome
    on_success.assert_called_once_with({"a": 1})
    on_error.assert_not_called()


def test_resolve_failure_fires_only_on_error() -> None:
    on_success, on_error = Mock(), Mock()
    error = InvalidURLError("bad")
    resolve(Outcome.failure(error), on_success=on_success, on_error=on_error)
    on_error.assert_called_once_with(error)
    on_success.assert_not_called()


def test_resolve_without_callbacks() -> None:
    outcome = Outcome.failure(InvalidURLError("bad"))
    assert resolve(outcome) is outcome


def test_resolve_propagates_callback_exception() -> None:
    on_success = Mock(side_effect=RuntimeError("callback failed"))
    with pytest.raises(RuntimeError, match=r"callback failed"):
        resolve(Outcome.success({"a": 1}), on_success=on_success)
