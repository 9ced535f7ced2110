"""
RetryEx - Exception Hierarchy.

Configuration errors raised by the retrier.
"""

from .base import (
    RetrierError,
    ConfigurationError,
    UninitializedWorkError,
)

__all__ = [
    "RetrierError",
    "ConfigurationError",
    "UninitializedWorkError",
]
