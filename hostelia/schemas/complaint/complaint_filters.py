"""
Complaint filtering schemas.

Filters are forwarded to the backend as query parameters.
"""

from typing import Any, Dict, Union

from pydantic import Field, field_validator

from hostelia.schemas.common.base import BaseFilterSchema
from hostelia.schemas.common.filters import clean_filter_value

__all__ = ["ComplaintFilterParams"]


class ComplaintFilterParams(BaseFilterSchema):
    """Complaint list filter parameters."""

    hostel: Union[str, None] = Field(default=None, description="Hostel block")
    status: Union[str, None] = Field(default=None, description="Complaint status")
    category: Union[str, None] = Field(default=None, description="Complaint category")
    query: Union[str, None] = Field(
        default=None,
        max_length=255,
        description="Search in title, description, room number and student",
    )

    @field_validator("hostel", "status", "category", "query", mode="before")
    @classmethod
    def drop_empty(cls, v):
        return clean_filter_value(v) if isinstance(v, str) else v

    def to_query_params(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)
