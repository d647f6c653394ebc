r"""Discriminated result of a single facade operation."""

from __future__ import annotations

__all__ = ["Outcome", "resolve"]

from dataclasses import dataclass
from typing import TYPE_CHECKING

from netfacade.callbacks import invoke_on_error, invoke_on_success

if TYPE_CHECKING:
    from netfacade.callbacks import ErrorCallback, JsonObject, SuccessCallback
    from netfacade.exceptions import NetworkError


@dataclass(frozen=True)
class Outcome:
    r"""Terminal result of a request: either a value or an error.

    Use ``Outcome.success`` or ``Outcome.failure`` to build instances.

    Attributes:
        value: The decoded JSON object on success, ``None`` otherwise.
        error: The error on failure, ``None`` otherwise.

    Example:
        ```pycon
        >>> from netfacade.outcome import Outcome
        >>> outcome = Outcome.success({"a": 1})
        >>> outcome.is_success
        True
        >>> outcome.unwrap()
        {'a': 1}

        ```
    """

    value: JsonObject | None = None
    error: NetworkError | None = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            msg = "Outcome requires exactly one of value or error"
            raise ValueError(msg)

    @classmethod
    def success(cls, value: JsonObject) -> Outcome:
        return cls(value=value)

    @classmethod
    def failure(cls, error: NetworkError) -> Outcome:
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        return self.error is None

    def unwrap(self) -> JsonObject:
        """Return the value or raise the stored error.

        Raises:
            NetworkError: If the outcome is a failure.
        """
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


def resolve(
    outcome: Outcome,
    *,
    on_success: SuccessCallback | None = None,
    on_error: ErrorCallback | None = None,
) -> Outcome:
    """Fire the terminal callback matching ``outcome`` and return it.

    Args:
        outcome: The outcome to report.
        on_success: Optional success callback.
        on_error: Optional error callback.

    Returns:
        The same outcome, for chaining.
    """
    if outcome.error is not None:
        invoke_on_error(on_error, outcome.error)
    else:
        invoke_on_success(on_success, outcome.value)  # type: ignore[arg-type]
    return outcome
