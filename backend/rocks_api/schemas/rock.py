"""
Rocks API — Pydantic Response Schemas
=======================================

What:  Pydantic models for the JSON responses of the API.
Why:   FastAPI uses these to serialize responses and generate the OpenAPI docs.

Plain-text endpoints (/, /rocks/{index}, /calculator/{operator}) have no
schema; they return PlainTextResponse directly.
"""

from typing import Optional

from pydantic import BaseModel, Field


class RockParams(BaseModel):
    """
    What:  Echo of the path parameters of GET /rocks/{index}/{name}.

    Both values are returned exactly as they appeared in the URL, as strings.
    No validation is applied: /rocks/banana/42 is answered as
    {"index": "banana", "name": "42"}.
    """
    index: str = Field(description="The index path segment, verbatim")
    name: str = Field(description="The name path segment, verbatim")


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Example:
        {
            "error": "not_found",
            "message": "No rock at index '42'",
            "details": {"resource": "rock", "resource_id": "42", "valid_range": "0..9"},
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")
