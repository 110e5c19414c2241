"""Core types: Result, Success, Failure."""

from resulting.types.result import (
    Failure,
    FoldHandlers,
    Result,
    Success,
    failure,
    is_failure_result,
    is_success_result,
    success,
)

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
