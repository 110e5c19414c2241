"""Error types raised or created by resulting."""

from __future__ import annotations

from typing import Any

__all__ = [
    'CaughtError',
    'FailureError',
    'ResultingError',
]

_UNSET: Any = object()


class ResultingError(Exception):
    """Base class for errors raised by resulting."""


class FailureError(ResultingError):
    """A Failure payload that is not an exception, raised by get_or_raise().

    Attributes:
        error: The original Failure payload.
    """

    def __init__(self, error: Any) -> None:
        self.error = error
        super().__init__(str(error))


class CaughtError(ResultingError):
    """Error built from a raised value that was not itself an exception.

    Attributes:
        message: The string form of the raised value.
        value: The raised value as it was caught.
    """

    def __init__(self, message: str, value: Any = _UNSET) -> None:
        self.message = message
        self.value = message if value is _UNSET else value
        super().__init__(message)
