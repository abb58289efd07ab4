"""Common Pydantic schemas shared across the API."""

from typing import Any

from pydantic import BaseModel


class FieldError(BaseModel):
    """One failed input check."""

    field: str | None = None
    message: str


class ErrorResponse(BaseModel):
    """Standardized error response."""

    error_code: str
    message: str
    details: Any | None = None
    errors: list[FieldError] | None = None


class MessageResponse(BaseModel):
    """Simple message response."""

    message: str
