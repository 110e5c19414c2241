"""run_catching: the boundary between raising code and Result-returning code."""

from __future__ import annotations

from collections.abc import Callable
from typing import overload

from resulting._config import active_config
from resulting._logging import get_logger
from resulting.errors import CaughtError, FailureError
from resulting.types.result import Failure, Success

__all__ = ['normalize_error', 'run_catching']

logger = get_logger(__name__)


@overload
def normalize_error(raised: Exception) -> Exception: ...


@overload
def normalize_error(raised: object) -> BaseException: ...


def normalize_error(raised: object) -> BaseException:
    """Turn a raised value into the error stored in a Failure.

    A FailureError is unwrapped to the payload it carries, so that a value
    which entered the exception channel through get_or_raise() is normalized
    as itself. Exceptions, including BaseExceptions such as
    KeyboardInterrupt, pass through unchanged. Strings become a CaughtError
    with that message; any other value becomes a CaughtError built from its
    string form.

    Examples:
        >>> normalize_error('plain string')
        CaughtError('plain string')
        >>> err = ValueError('x')
        >>> normalize_error(err) is err
        True
    """
    if isinstance(raised, FailureError):
        raised = raised.error
    if isinstance(raised, BaseException):
        return raised
    if isinstance(raised, str):
        return CaughtError(raised, raised)
    return CaughtError(str(raised), raised)


def run_catching[T](block: Callable[[], T]) -> Success[T] | Failure[Exception]:
    """Call block and capture its outcome as a Result.

    Any Exception raised by block is caught, normalized with
    normalize_error() and returned as a Failure. Interpreter control-flow
    exceptions (KeyboardInterrupt, SystemExit, GeneratorExit) are not
    Exceptions and propagate.

    Args:
        block: Zero-argument callable to invoke.

    Returns:
        Success wrapping the return value, or Failure wrapping the error.

    Example:
        ```python
        run_catching(lambda: int('42'))
        # Success(value=42)
        run_catching(lambda: int('x'))
        # Failure(error=ValueError("invalid literal for int() with base 10: 'x'"))
        ```
    """
    try:
        value = block()
    except Exception as e:  # noqa: BLE001
        error = normalize_error(e)
        if active_config().log_caught:
            logger.debug(
                'caught exception',
                error_type=type(e).__name__,
                normalized=error is not e,
            )
        return Failure(error)
    return Success(value)
