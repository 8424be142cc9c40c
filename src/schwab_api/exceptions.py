"""Exception Hierarchy.

Only errors raised locally, before any network I/O, live here. HTTP and
transport failures are raised by httpx and reach the caller unchanged.
"""

from typing import Any, Dict, List, Optional


class SchwabApiError(Exception):
    """Base exception for all errors raised by this package."""

    def __init__(
        self,
        message: str,
        details: Optional[List[Dict[str, Any]]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or []


class RequestBuildError(SchwabApiError, ValueError):
    """Raised when inputs cannot produce a well-formed request."""

    def __init__(
        self,
        message: str = "Invalid request parameters",
        field: Optional[str] = None,
    ):
        details = [{"field": field, "issue": message}] if field else None
        super().__init__(message, details)
        self.field = field
