"""
ReliefHub Backend — Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for the few failures the API reports.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return JSON error envelopes with the matching HTTP status code.
Who:   Raised by services and the document store; caught by global handlers.

Exception Hierarchy:
    ReliefHubError (base)
    ├── ConflictError       → 400 Bad Request (duplicate registration)
    ├── UnauthorizedError   → 401 Unauthorized (bad credentials)
    └── DatabaseError       → 500 Internal Server Error

Everything else (malformed identifiers, driver failures, bugs) falls through
to the catch-all handler and is reported as a generic 500.
"""

from typing import Any, Dict, Optional


class ReliefHubError(Exception):
    """
    Base exception for all ReliefHub application errors.

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


class ConflictError(ReliefHubError):
    """
    Raised when a record collides with an existing one.

    When:    Registering an email that already belongs to a user.
    HTTP:    400 Bad Request, the status existing clients already handle.
    """

    def __init__(
        self,
        message: str = "User already exists",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class UnauthorizedError(ReliefHubError):
    """
    Raised when supplied credentials do not match a stored user.

    The message is identical for an unknown email and a wrong password so
    the response does not reveal which accounts exist.
    """

    def __init__(
        self,
        message: str = "Invalid email or password",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(ReliefHubError):
    """
    Raised when the document store is unreachable or not yet connected.

    Security Note:
        The message returned to the client is always generic. Connection
        strings and driver messages are logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
