"""
User directory schemas (students, wardens, admins).
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Union

from pydantic import EmailStr, Field, field_validator

from hostelia.schemas.common.base import BaseFilterSchema, TimestampMixin, UpstreamSchema
from hostelia.schemas.common.enums import AcademicYear, Hostel, UserRole
from hostelia.schemas.common.filters import clean_filter_value

__all__ = [
    "User",
    "UserFilterParams",
]


class User(UpstreamSchema, TimestampMixin):
    """A directory entry as returned by the backend (never includes the password)."""

    id: str = Field(..., alias="_id")
    name: str = Field(..., min_length=1)
    email: EmailStr = Field(...)
    role: UserRole = Field(default=UserRole.STUDENT)
    roll_no: Optional[str] = Field(default=None, alias="rollNo")
    hostel: Optional[Hostel] = None
    room_no: Optional[str] = Field(default=None, alias="roomNo")
    year: Optional[AcademicYear] = None


class UserFilterParams(BaseFilterSchema):
    """
    Student / warden list filters.

    ``query`` is sent to the backend as ``search``.
    """

    hostel: Union[str, None] = Field(default=None, description="Hostel block")
    year: Union[str, None] = Field(default=None, description="Academic year")
    query: Union[str, None] = Field(
        default=None,
        max_length=255,
        description="Match on name, email or roll number",
    )

    @field_validator("hostel", "year", "query", mode="before")
    @classmethod
    def drop_empty(cls, v):
        return clean_filter_value(v) if isinstance(v, str) else v

    def to_query_params(self) -> Dict[str, Any]:
        params = self.model_dump(exclude_none=True)
        if "query" in params:
            params["search"] = params.pop("query")
        return params
