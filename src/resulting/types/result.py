"""Result type: Success[T] | Failure[E] for explicit error handling."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, NoReturn, TypeIs, overload

import msgspec

from resulting.errors import FailureError

__all__ = [
    'Failure',
    'FoldHandlers',
    'Result',
    'Success',
    'failure',
    'is_failure_result',
    'is_success_result',
    'success',
]


class FoldHandlers[T, E, U](msgspec.Struct, frozen=True):
    """Named pair of handlers accepted by fold().

    Examples:
        >>> handlers = FoldHandlers(on_success=len, on_failure=lambda e: -1)
        >>> success('abc').fold(handlers)
        3
    """

    on_success: Callable[[T], U]
    on_failure: Callable[[E], U]


def _resolve_handlers(
    on_success: Callable[[Any], Any] | FoldHandlers[Any, Any, Any] | Mapping[str, Any],
    on_failure: Callable[[Any], Any] | None,
) -> tuple[Callable[[Any], Any], Callable[[Any], Any]]:
    """Normalize the accepted fold() call forms into a (success, failure) pair."""
    if isinstance(on_success, FoldHandlers):
        if on_failure is not None:
            msg = 'fold() takes either a FoldHandlers or two handlers, not both'
            raise TypeError(msg)
        return on_success.on_success, on_success.on_failure
    if isinstance(on_success, Mapping):
        if on_failure is not None:
            msg = 'fold() takes either a handlers mapping or two handlers, not both'
            raise TypeError(msg)
        missing = [key for key in ('on_success', 'on_failure') if on_success.get(key) is None]
        if missing:
            msg = f'fold() handlers mapping is missing {", ".join(missing)}'
            raise TypeError(msg)
        return on_success['on_success'], on_success['on_failure']
    if on_failure is None:
        msg = 'fold() requires both on_success and on_failure'
        raise TypeError(msg)
    return on_success, on_failure


def _display(payload: object) -> str:
    if isinstance(payload, BaseException):
        name = type(payload).__name__
        message = str(payload)
        return f'{name}: {message}' if message else name
    return str(payload)


class Success[T](msgspec.Struct, frozen=True):
    """Success variant of Result containing a value of type T.

    A Success of ``None`` is the unit success: the operation completed and
    produced no payload. It is still a success for every query.

    Examples:
        >>> ok = success(42)
        >>> ok.get_or_none()
        42
        >>> ok.map(lambda x: x * 2)
        Success(value=84)
        >>> str(ok)
        'Success(42)'
    """

    value: T

    def is_success(self) -> bool:
        """Return True since this is Success."""
        return True

    def is_failure(self) -> bool:
        """Return False since this is Success."""
        return False

    def get_or_none(self) -> T:
        """Return the contained value."""
        return self.value

    def get_or_raise(self) -> T:
        """Return the contained value; nothing is raised for Success."""
        return self.value

    def get_or_default(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def get_or_else[U](self, on_failure: Callable[[Any], U]) -> T:  # noqa: ARG002
        """Return the contained value without calling on_failure."""
        return self.value

    def error_or_none(self) -> None:
        """Return None since there is no error."""
        return None

    def map[U](self, transform: Callable[[T], U]) -> Success[U]:
        """Apply a function to the contained value.

        Args:
            transform: Function applied to the Success value.

        Returns:
            Success containing the result of transform.
        """
        return Success(transform(self.value))

    def map_error[F](self, transform: Callable[[Any], F]) -> Success[T]:  # noqa: ARG002
        """Return self unchanged since this is Success."""
        return self

    def map_catching[U](self, transform: Callable[[T], U]) -> Success[U] | Failure[Exception]:
        """Apply a function to the contained value, catching what it raises.

        Args:
            transform: Function applied to the Success value. It may raise.

        Returns:
            Success with the transformed value, or Failure carrying the
            normalized exception raised by transform.
        """
        from resulting.boundary import run_catching  # noqa: PLC0415

        value = self.value
        return run_catching(lambda: transform(value))

    def recover[U](self, transform: Callable[[Any], U]) -> Success[T]:  # noqa: ARG002
        """Return self unchanged since there is nothing to recover from."""
        return self

    def recover_catching[U](self, transform: Callable[[Any], U]) -> Success[T]:  # noqa: ARG002
        """Return self unchanged; transform is never called."""
        return self

    def fold[U](
        self,
        on_success: Callable[[T], U] | FoldHandlers[T, Any, U] | Mapping[str, Any],
        on_failure: Callable[[Any], U] | None = None,
    ) -> U:
        """Collapse the Result into a plain value by calling on_success.

        Accepts two handlers (positionally or by keyword), a FoldHandlers,
        or a mapping with ``on_success`` and ``on_failure`` keys.
        """
        handle_success, _ = _resolve_handlers(on_success, on_failure)
        return handle_success(self.value)

    def on_success(self, action: Callable[[T], Any]) -> Success[T]:
        """Call action with the contained value and return self."""
        action(self.value)
        return self

    def on_failure(self, action: Callable[[Any], Any]) -> Success[T]:  # noqa: ARG002
        """Return self without calling action."""
        return self

    def __str__(self) -> str:
        return f'Success({self.value})'


class Failure[E](msgspec.Struct, frozen=True):
    """Failure variant of Result containing an error of type E.

    The error defaults to an exception but may be any value. A Failure of
    ``None`` is the unit failure.

    Examples:
        >>> err = failure(ValueError('boom'))
        >>> err.is_failure()
        True
        >>> err.get_or_default(0)
        0
        >>> str(err)
        'Failure(ValueError: boom)'
    """

    error: E

    def is_success(self) -> bool:
        """Return False since this is Failure."""
        return False

    def is_failure(self) -> bool:
        """Return True since this is Failure."""
        return True

    def get_or_none(self) -> None:
        """Return None since there is no value."""
        return None

    def get_or_raise(self) -> NoReturn:
        """Raise the contained error.

        Raises:
            BaseException: The contained error, when it is an exception.
            FailureError: Wrapping the contained error otherwise.
        """
        if isinstance(self.error, BaseException):
            raise self.error
        raise FailureError(self.error)

    def get_or_default[T](self, default: T) -> T:
        """Return the default since this is Failure."""
        return default

    def get_or_else[U](self, on_failure: Callable[[E], U]) -> U:
        """Return the result of calling on_failure with the contained error."""
        return on_failure(self.error)

    def error_or_none(self) -> E:
        """Return the contained error."""
        return self.error

    def map[T, U](self, transform: Callable[[T], U]) -> Failure[E]:  # noqa: ARG002
        """Return a Failure carrying the same error; transform is never called."""
        return Failure(self.error)

    def map_error[F](self, transform: Callable[[E], F]) -> Failure[F]:
        """Apply a function to the contained error.

        Args:
            transform: Function applied to the error.

        Returns:
            Failure containing the transformed error.
        """
        return Failure(transform(self.error))

    def map_catching[T, U](self, transform: Callable[[T], U]) -> Failure[E]:  # noqa: ARG002
        """Return a Failure carrying the same error; transform is never called."""
        return Failure(self.error)

    def recover[U](self, transform: Callable[[E], U]) -> Success[U]:
        """Turn the failure into a Success using transform.

        transform must not raise; use recover_catching() when it might.
        """
        return Success(transform(self.error))

    def recover_catching[U](self, transform: Callable[[E], U]) -> Success[U] | Failure[Exception]:
        """Turn the failure into a Success, catching what transform raises.

        A raising transform yields a Failure carrying the new error, not
        the original one.
        """
        from resulting.boundary import run_catching  # noqa: PLC0415

        error = self.error
        return run_catching(lambda: transform(error))

    def fold[U](
        self,
        on_success: Callable[[Any], U] | FoldHandlers[Any, E, U] | Mapping[str, Any],
        on_failure: Callable[[E], U] | None = None,
    ) -> U:
        """Collapse the Result into a plain value by calling on_failure.

        Accepts the same call forms as Success.fold().
        """
        _, handle_failure = _resolve_handlers(on_success, on_failure)
        return handle_failure(self.error)

    def on_success(self, action: Callable[[Any], Any]) -> Failure[E]:  # noqa: ARG002
        """Return self without calling action."""
        return self

    def on_failure(self, action: Callable[[E], Any]) -> Failure[E]:
        """Call action with the contained error and return self."""
        action(self.error)
        return self

    def __str__(self) -> str:
        return f'Failure({_display(self.error)})'


type Result[T, E = Exception] = Success[T] | Failure[E]


@overload
def success() -> Success[None]: ...


@overload
def success[T](value: T) -> Success[T]: ...


def success(value: Any = None) -> Success[Any]:
    """Create a Success.

    Called without arguments it returns the unit success, ``Success(None)``.

    Examples:
        >>> success()
        Success(value=None)
        >>> success('x')
        Success(value='x')
    """
    return Success(value)


@overload
def failure() -> Failure[None]: ...


@overload
def failure[E](error: E) -> Failure[E]: ...


def failure(error: Any = None) -> Failure[Any]:
    """Create a Failure.

    Called without arguments it returns the unit failure, ``Failure(None)``.
    """
    return Failure(error)


def is_success_result[T, E](result: Result[T, E]) -> TypeIs[Success[T]]:
    """Return True if result is Success, narrowing its type.

    Examples:
        >>> r = success(1)
        >>> if is_success_result(r):
        ...     r.value
        1
    """
    return isinstance(result, Success)


def is_failure_result[T, E](result: Result[T, E]) -> TypeIs[Failure[E]]:
    """Return True if result is Failure, narrowing its type."""
    return isinstance(result, Failure)
