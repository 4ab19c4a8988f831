"""Error taxonomy for talking to the school directory service."""
from typing import Dict, Optional


class SchoolsApiError(Exception):
    """Base class for every failure of a directory action."""


class ValidationError(SchoolsApiError):
    """One or more form fields broke a client-side rule."""

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        super().__init__(", ".join(f"{k}: {v}" for k, v in self.errors.items()))


class TransportError(SchoolsApiError):
    """The request raised, timed out or came back with a non-2xx status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class ServerReportedFailure(SchoolsApiError):
    """A response arrived but its success flag was false, absent or unreadable."""
