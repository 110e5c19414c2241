"""@catching decorator: run_catching applied to every call of a function."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import wrapt

from resulting.boundary import run_catching
from resulting.types.result import Failure, Success

__all__ = ['catching']


def catching[**P, T](func: Callable[P, T]) -> Callable[P, Success[T] | Failure[Exception]]:
    """Decorator that returns every call's outcome as a Result.

    Each call is routed through run_catching(), so a normal return becomes
    Success(value) and a raised Exception becomes a Failure with the
    normalized error. Works on plain functions, methods and classmethods;
    the wrapped function keeps its name, docstring and signature.

    Args:
        func: The function to wrap.

    Returns:
        A wrapped function that returns Result[T, Exception] instead of T.

    Example:
        ```python
        @catching
        def parse_port(raw: str) -> int:
            return int(raw)

        parse_port('8080')
        # Success(value=8080)
        parse_port('http')
        # Failure(error=ValueError("invalid literal for int() with base 10: 'http'"))
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,  # noqa: ARG001
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Success[T] | Failure[Exception]:
        return run_catching(lambda: wrapped(*args, **kwargs))

    return wrapper(func)
