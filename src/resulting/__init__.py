"""resulting: a Success/Failure Result type for Python 3.13+.

Flat imports (preferred):
    from resulting import Result, Success, Failure, success, failure
    from resulting import run_catching, catching

Submodule imports (for organization):
    from resulting.types import Result, Success, Failure
    from resulting.boundary import run_catching, normalize_error
    from resulting.decorators import catching
"""

# Types
from resulting.types import (
    Failure,
    FoldHandlers,
    Result,
    Success,
    failure,
    is_failure_result,
    is_success_result,
    success,
)

# Catching
from resulting.boundary import normalize_error, run_catching
from resulting.decorators import catching

# Errors
from resulting.errors import CaughtError, FailureError, ResultingError

# Configuration and logging
from resulting._config import ResultingConfig, get_config, init
from resulting._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)

__all__ = [
    'CaughtError',
    'Failure',
    'FailureError',
    'FoldHandlers',
    'Result',
    'ResultingConfig',
    'ResultingError',
    'Success',
    'add_log_hook',
    'catching',
    'clear_log_hooks',
    'configure_logging',
    'failure',
    'get_config',
    'get_logger',
    'init',
    'is_failure_result',
    'is_success_result',
    'normalize_error',
    'remove_log_hook',
    'run_catching',
    'success',
]
