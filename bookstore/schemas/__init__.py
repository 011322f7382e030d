"""
Pydantic Schemas Package

This package contains Pydantic models for request/response validation.

WHY Separate Schemas from SQLAlchemy Models?
============================================
1. Security: Control exactly what data is exposed in API responses
2. Validation: Different rules for create vs update vs response
3. Decoupling: Database schema can evolve independently of API
4. Documentation: Schemas generate OpenAPI documentation

Schema Naming Convention:
- XxxBase: Shared fields between create/response
- XxxCreate: Fields required when creating a new record
- XxxUpdate: Fields allowed when updating (all optional)
- XxxResponse: Fields returned in API responses
"""

from bookstore.schemas.book import (
    BookBase,
    BookCreate,
    BookEnvelope,
    BookListResponse,
    BookResponse,
    BookUpdate,
    MessageResponse,
)
from bookstore.schemas.errors import ErrorResponse, FieldError, ValidationErrorResponse

__all__ = [
    # Book schemas
    "BookBase",
    "BookCreate",
    "BookUpdate",
    "BookResponse",
    "BookEnvelope",
    "BookListResponse",
    "MessageResponse",
    # Error schemas
    "ErrorResponse",
    "FieldError",
    "ValidationErrorResponse",
]
