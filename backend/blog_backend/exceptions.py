"""
Blog Backend: Custom Exception Hierarchy
==========================================

What:  Application-specific exceptions for the two places a request can fail.
How:   Each exception carries a message and optional context dict.
       Global exception handlers (registered in main.py) turn them into
       structured JSON or HTML error responses.
Who:   Raised by the post service and the view-layer API client.

Exception Hierarchy:
    BlogError (base)
    ├── StorageError     → 500 Internal Server Error (raw storage message)
    └── ApiClientError   → upstream status code (view layer only)

There is a single failure category on the API side: the storage call failed.
A missing row, a constraint violation and a dropped connection all surface
as StorageError with the message the storage layer produced.
"""

from typing import Any, Dict, Optional


class BlogError(Exception):
    """
    Base exception for all blog application errors.

    Attributes:
        message:  Error description returned to the caller
        context:  Additional debug info (logged, not returned)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class StorageError(BlogError):
    """
    Raised when a call to the posts table fails for any reason.

    HTTP:    500 Internal Server Error

    The message is the underlying error text, relayed verbatim. Lookups
    that match no row raise this too; callers cannot tell "not found"
    apart from other failures.
    """

    def __init__(
        self,
        message: str = "Storage call failed",
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if operation:
            ctx["operation"] = operation
        super().__init__(message=message, context=ctx)
        self.operation = operation


class ApiClientError(BlogError):
    """
    Raised by the view layer's HTTP client when the posts API answers non-2xx.

    What:    Carries the upstream status code and error message so the
             screen can show them unchanged.
    """

    def __init__(
        self,
        status_code: int,
        message: str = "The posts API returned an error",
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["status_code"] = status_code
        super().__init__(message=message, context=ctx)
        self.status_code = status_code
