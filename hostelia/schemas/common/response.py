# --- File: hostelia/schemas/common/response.py ---
"""
Envelopes wrapped around every API payload.

Successful calls return ``{success, message, data}``; failures rendered by the
exception handlers return ``{success: false, message, error_code, errors, ...}``.
"""

from typing import Generic, List, Optional, TypeVar

from pydantic import Field

from hostelia.schemas.common.base import BaseSchema

T = TypeVar("T")

__all__ = [
    "SuccessResponse",
    "ErrorDetail",
    "ErrorResponse",
]


class SuccessResponse(BaseSchema, Generic[T]):

    success: bool = True
    message: str = "OK"
    data: Optional[T] = None

    @classmethod
    def create(cls, data: Optional[T] = None, message: str = "OK"):
        return cls(success=True, message=message, data=data)


class ErrorDetail(BaseSchema):
    """One field-level problem inside an error response."""

    field: Optional[str] = Field(default=None, description="Offending field, if any")
    message: str
    code: Optional[str] = None
    location: Optional[List[str]] = Field(
        default=None,
        description="Path to the value, e.g. ['query', 'page']",
    )


class ErrorResponse(BaseSchema):

    success: bool = False
    message: str
    error_code: Optional[str] = None
    errors: Optional[List[ErrorDetail]] = None
    timestamp: Optional[str] = Field(default=None, description="ISO-8601, UTC")
    path: Optional[str] = None
