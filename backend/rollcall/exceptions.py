"""
Rollcall Backend — Custom Exception Hierarchy
=============================================

What:  Application-specific exceptions for the error outcomes of a request.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with the matching status code.
Who:   Raised by services and middleware; caught by global handlers.

Exception Hierarchy:
    RollcallError (base)
    ├── NotFoundError            → 404 Not Found
    ├── ConflictError            → 409 Conflict
    ├── DatabaseError            → 500 Internal Server Error
    └── RateLimitExceededError   → 429 Too Many Requests

Payload deserialization errors are not part of this hierarchy; FastAPI
answers them with 422 before any handler runs.
"""

from typing import Any, Dict, Optional


class RollcallError(Exception):
    """
    Base exception for all Rollcall application errors.

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
        self.context = dict(context or {})
        super().__init__(self.message)


class NotFoundError(RollcallError):
    """
    Raised when a requested resource does not exist.

    When:    GET/PUT/DELETE /api/v1/student/{id} with an unknown id.
    HTTP:    404 Not Found

    SQLAlchemy returns None for missing rows; the service layer converts
    that None into this exception.
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
        ctx = dict(context or {})
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class ConflictError(RollcallError):
    """
    Raised when a write would violate a uniqueness rule.

    When:    Creating or updating a student with an email owned by another
             student, or creating a student with an id that is already taken.
    HTTP:    409 Conflict

    Example response:
        {
            "error": "conflict",
            "message": "Email 'email3@gmail.com' is already taken",
            "details": {"field": "email"}
        }
    """

    def __init__(
        self,
        message: str = "The request conflicts with an existing resource",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = dict(context or {})
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class DatabaseError(RollcallError):
    """
    Raised when database operations fail unexpectedly.

    When:    Connection lost mid-query, deadlock, unexpected constraint failure.
    HTTP:    500 Internal Server Error

    The message returned to the client is always generic; SQL and
    constraint names only ever reach the server log.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class RateLimitExceededError(RollcallError):
    """
    Raised when a client exceeds the per-IP request rate limit.

    When:    After rate_limit_requests (default: 100) in rate_limit_window (default: 1 hour).
    HTTP:    429 Too Many Requests, with a Retry-After header
    """

    def __init__(
        self,
        retry_after: int = 60,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = (
            f"Rate limit exceeded. Please wait {retry_after} seconds before making more requests."
        )
        ctx = dict(context or {})
        ctx["retry_after"] = retry_after
        super().__init__(message=message, context=ctx)
        self.retry_after = retry_after
