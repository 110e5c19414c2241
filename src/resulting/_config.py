"""Library configuration: ResultingConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from resulting._logging import configure_logging

__all__ = [
    'ResultingConfig',
    'get_config',
    'init',
]

_FALSE_VALUES = frozenset({'0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class ResultingConfig:
    """Configuration for resulting.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_output: Render logs as JSON (True) or console text (False).
        log_caught: Emit a DEBUG event whenever run_catching() catches.
    """

    log_level: str | None = None
    json_output: bool = True
    log_caught: bool = True


# Global configuration (set by init())
_config: ResultingConfig | None = None


def _detect_log_level() -> str | None:
    """Read RESULTING_LOG_LEVEL; empty or unset means silent."""
    level = os.environ.get('RESULTING_LOG_LEVEL', '').strip()
    return level.upper() or None


def _detect_json_output() -> bool:
    """Read RESULTING_LOG_FORMAT ("json" or "console"), defaulting to JSON."""
    log_format = os.environ.get('RESULTING_LOG_FORMAT', '').lower()
    if log_format == 'console':
        return False
    if log_format and log_format != 'json':
        logging.warning("Unknown RESULTING_LOG_FORMAT value '%s', defaulting to json", log_format)
    return True


def _detect_log_caught() -> bool:
    """Read RESULTING_LOG_CAUGHT; falsy spellings disable caught-error events."""
    value = os.environ.get('RESULTING_LOG_CAUGHT', '').strip().lower()
    return value not in _FALSE_VALUES


def init(
    log_level: str | None = None,
    *,
    json_output: bool | None = None,
    log_caught: bool | None = None,
) -> ResultingConfig:
    """Initialize resulting with the specified configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from
            RESULTING_LOG_LEVEL if None; unset there means silent.
        json_output: JSON (True) or console (False) log rendering. Read
            from RESULTING_LOG_FORMAT if None.
        log_caught: Whether run_catching() logs caught exceptions. Read
            from RESULTING_LOG_CAUGHT if None.

    Returns:
        The ResultingConfig that was set.

    Example:
        ```python
        import resulting

        # Everything from the environment
        resulting.init()

        # Explicit configuration
        resulting.init(log_level="DEBUG", json_output=False)
        ```
    """
    global _config  # noqa: PLW0603

    _config = ResultingConfig(
        log_level=log_level if log_level is not None else _detect_log_level(),
        json_output=json_output if json_output is not None else _detect_json_output(),
        log_caught=log_caught if log_caught is not None else _detect_log_caught(),
    )

    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.json_output)

    return _config


def get_config() -> ResultingConfig:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'resulting not initialized. Call resulting.init() first.'
        raise RuntimeError(msg)
    return _config


def active_config() -> ResultingConfig:
    """Return the configuration set by init(), or the defaults."""
    return _config if _config is not None else ResultingConfig()
