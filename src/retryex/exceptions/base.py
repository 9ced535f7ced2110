"""
Base exception classes for retrier operations.

Failures raised by the retried work never surface through these types; they
are routed to the failure handler instead. Only misconfiguration is raised.
"""


class RetrierError(Exception):
    """Base exception for all retrier errors."""

    def __init__(self, message: str, *, field: str | None = None):
        super().__init__(message)
        self.message = message
        self.field = field

    def __str__(self) -> str:
        if self.field:
            return f"{self.message} (field: {self.field})"
        return self.message


class ConfigurationError(RetrierError):
    """Raised when a retrier is configured with invalid values."""


class UninitializedWorkError(ConfigurationError):
    """Raised when a run is requested before a work callable is set."""

    def __init__(self, message: str = "Work callable is not initialized", **kwargs):
        kwargs.setdefault("field", "work")
        super().__init__(message, **kwargs)
