"""
Sycamore Backend — Custom Exception Hierarchy
===============================================

What:  Application-specific exceptions for the two failure kinds the API knows.
Why:   Services raise typed errors; global handlers in main.py turn them into
       the fixed JSON envelopes and status codes each endpoint promises.
How:   Each exception carries a public message and an optional context dict
       (logged server-side, never returned to the client).

Exception Hierarchy:
    SycamoreError (base)
    ├── DocumentationNotFoundError  → 404 {success: false, error}
    └── DatabaseError               → 500 {message}
"""

import enum
from typing import Any, Dict, Optional


class SycamoreError(Exception):
    """
    Base exception for all Sycamore application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class DocumentationReadFailure(str, enum.Enum):
    """Why the documentation file could not be read."""

    NOT_FOUND = "not_found"
    UNREADABLE = "unreadable"
    UNKNOWN = "unknown"


class DocumentationNotFoundError(SycamoreError):
    """
    Raised when the documentation file cannot be served.

    HTTP:    404 Not Found, regardless of `reason`.

    The reason is kept so callers and logs can tell a missing file from a
    permission problem; the response does not distinguish them.
    """

    def __init__(
        self,
        reason: DocumentationReadFailure = DocumentationReadFailure.NOT_FOUND,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["reason"] = reason.value
        super().__init__(message="Documentation not found.", context=ctx)
        self.reason = reason


class DatabaseError(SycamoreError):
    """
    Raised when the member store cannot be reached or a query fails.

    HTTP:    500 Internal Server Error

    The message is the endpoint's public failure text (e.g. "Failed to fetch
    members"). The driver error goes into `context` for the server log only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
