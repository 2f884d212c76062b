"""
Quotes API - Custom Exception Hierarchy
========================================

What:  Application-specific exceptions, one per kind of failure the API reports.
How:   Each exception carries a user-facing message and an optional context
       dict. Global handlers registered in main.py turn them into the JSON
       error envelope with the matching HTTP status code.

Exception Hierarchy:
    QuotesApiError (base)
    ├── ValidationError        → 400 Bad Request
    ├── AuthenticationError    → 401 Unauthorized
    ├── PermissionDeniedError  → 403 Forbidden
    ├── NotFoundError          → 404 Not Found
    └── DatabaseError          → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class QuotesApiError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client,
                  except for validation details)
    """

    status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(QuotesApiError):
    """
    Raised when client input fails a business rule.

    When:    Missing or empty quote text on create or update.
    HTTP:    400 Bad Request

    Schema-level problems (malformed JSON, non-integer path ids) are still
    answered by FastAPI with 422.
    """

    status_code = 400

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class AuthenticationError(QuotesApiError):
    """The `api-password` header is missing. HTTP 401."""

    status_code = 401

    def __init__(
        self,
        message: str = (
            "Authentication required. Please provide password in api-password header."
        ),
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class PermissionDeniedError(QuotesApiError):
    """The `api-password` header does not match. HTTP 403."""

    status_code = 403

    def __init__(
        self,
        message: str = "Invalid password. Access denied.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(QuotesApiError):
    """
    Raised when a requested resource does not exist.

    The service layer converts SQLAlchemy's None result into this exception
    so that routes never deal with missing rows themselves.
    """

    status_code = 404

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource.capitalize()} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(QuotesApiError):
    """
    Raised when database operations fail unexpectedly.

    The message returned to the client is always generic; the original
    error type is kept in context and logged server-side only.
    """

    status_code = 500

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
