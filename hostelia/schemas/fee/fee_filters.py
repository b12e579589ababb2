"""
Fee list filtering schemas.

The backend returns every submission in scope, so these filters are applied
locally. Hostel membership is resolved through the student directory.
"""

from typing import Union

from pydantic import Field, field_validator

from hostelia.schemas.common.base import BaseFilterSchema
from hostelia.schemas.common.enums import FeeStatus, FeeType
from hostelia.schemas.common.filters import clean_filter_value

__all__ = ["FeeFilterParams"]


class FeeFilterParams(BaseFilterSchema):
    """Fee list filter parameters."""

    hostel: Union[str, None] = Field(default=None, description="Hostel block")
    fee_type: Union[FeeType, None] = Field(
        default=None,
        description="Restrict to hostel or mess fee",
    )
    status: Union[FeeStatus, None] = Field(default=None, description="Document status")
    query: Union[str, None] = Field(
        default=None,
        max_length=255,
        description="Match on student name or email",
    )

    @field_validator("hostel", "fee_type", "status", "query", mode="before")
    @classmethod
    def drop_empty(cls, v):
        return clean_filter_value(v) if isinstance(v, str) else v
