"""
Rocks API — Custom Exception Hierarchy
========================================

What:  Defines application-specific exceptions for different error scenarios.
Why:   Custom exceptions enable targeted error handling with appropriate HTTP
       status codes and user-friendly messages.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by services; caught by global handlers.

Exception Hierarchy:
    RocksAPIError (base)             → 500 Internal Server Error
    └── NotFoundError                → 404 Not Found
        └── RockNotFoundError        → 404 Not Found (bad collection index)

Deliberately NOT errors:
    - Unknown calculator operator: result is 0
    - Non-numeric calculator input: result is NaN
    Both come back as ordinary 200 text responses.
"""

from typing import Any, Dict, Optional


class RocksAPIError(Exception):
    """
    Base exception for all Rocks API errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info returned as "details"
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(RocksAPIError):
    """
    Raised when a requested resource does not exist.

    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        message: Optional[str] = None,
    ):
        if message is None:
            message = f"The requested {resource} was not found"
            if resource_id is not None:
                message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class RockNotFoundError(NotFoundError):
    """
    Raised when GET /rocks/{index} names no element of the collection.

    When:    The index is negative, past the end, or not a base-10 integer.
    HTTP:    404 Not Found

    The response details carry the collection size so a client can see the
    valid range without a second request.
    """

    def __init__(self, index: str, size: int):
        super().__init__(
            resource="rock",
            resource_id=index,
            context={"valid_range": f"0..{size - 1}" if size else "empty"},
            message=f"No rock at index '{index}'",
        )
        self.index = index
