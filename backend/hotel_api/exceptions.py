"""
Hotel Reservations Backend — Custom Exception Hierarchy
=========================================================

What:  Application-specific exceptions for the error cases the API reports.
Why:   Services raise domain errors; global handlers in main.py turn them
       into JSON responses with the right status code. Routes never build
       error responses themselves.
How:   Each exception carries a user-facing message and a context dict that
       is logged (and, for client errors, returned as "details").

Exception Hierarchy:
    HotelAPIError (base)     → 500
    ├── ValidationError      → 400 Bad Request (client can fix)
    ├── NotFoundError        → 404 Not Found
    └── DatabaseError        → 500 Internal Server Error (generic message)
"""

from typing import Any, Dict, Optional


class HotelAPIError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(HotelAPIError):
    """
    Raised when client input fails a business rule.

    When:    Missing or malformed search dates, check-in not before check-out.
    HTTP:    400 Bad Request

    Schema-level problems (wrong JSON types, negative price) are caught
    earlier by FastAPI and keep its default 422 response.

    Example response:
        {
            "error": "validation_error",
            "message": "Invalid date format. Use yyyy-MM-dd",
            "details": {"field": "checkIn", "value": "10/06/2024"}
        }
    """

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


class NotFoundError(HotelAPIError):
    """
    Raised when a requested room or reservation does not exist.

    SQLAlchemy returns None for missing rows; the stores convert that into
    this exception so routes stay free of status-code logic.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(HotelAPIError):
    """
    Raised when a database operation fails unexpectedly.

    The message returned to the client is always generic. Query text and
    driver errors are logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
