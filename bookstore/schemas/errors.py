"""
Error Response Schemas

Shapes of error bodies, used for OpenAPI documentation of the
non-2xx responses.
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Generic error body: {"detail": "..."}."""

    detail: str = Field(..., examples=["Book with isbn 0691161518 not found"])


class FieldError(BaseModel):
    """One violated constraint in a request."""

    field: str = Field(..., examples=["pages"])
    message: str = Field(..., examples=["Input should be a valid integer"])


class ValidationErrorResponse(ErrorResponse):
    """400 body listing every invalid field."""

    errors: list[FieldError] = Field(default=[])
