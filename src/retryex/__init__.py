"""
RetryEx - Resilient retry helper.

Re-invokes a unit of work a bounded number of times with a fixed delay,
routing each failure to a caller-supplied handler.
"""

from .exceptions import (
    RetrierError,
    ConfigurationError,
    UninitializedWorkError,
)
from .retry import (
    DEFAULT_RETRY_COUNT,
    DEFAULT_RETRY_DELAY_MS,
    RetryConfig,
    Retrier,
    RetryOutcome,
    RetryStatus,
    with_retry,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Exceptions
    "RetrierError",
    "ConfigurationError",
    "UninitializedWorkError",
    # Retry
    "DEFAULT_RETRY_COUNT",
    "DEFAULT_RETRY_DELAY_MS",
    "RetryConfig",
    "Retrier",
    "RetryOutcome",
    "RetryStatus",
    "with_retry",
]
