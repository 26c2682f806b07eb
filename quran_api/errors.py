"""
Exception types raised by the resource pipeline.
"""
from typing import List, Optional, Tuple


class QuranApiError(Exception):
    """Base class for errors surfaced by the gateway."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ValidationError(QuranApiError):
    """
    Raised when tool arguments fail schema validation.

    Always terminal: never retried and never replaced by fallback data.
    """

    def __init__(self, issues: List[Tuple[str, str]]):
        self.issues = list(issues)
        details = ", ".join(f"{path}: {msg}" for path, msg in self.issues)
        super().__init__(f"Validation error: {details}", status_code=400)

    def to_list(self) -> List[dict]:
        return [{"field": path, "message": msg} for path, msg in self.issues]


class TransportError(QuranApiError):
    """
    Raised when the upstream call fails.

    Attributes:
        status: HTTP status of the last response, None if no response arrived
        retryable: True for connectivity failures and 5xx responses
    """

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        retryable: bool = False,
    ):
        super().__init__(message, status_code=status or 500)
        self.status = status
        self.retryable = retryable
