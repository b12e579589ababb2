# --- File: hostelia/schemas/common/base.py ---
"""
Base schema classes with common fields and configurations.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "BaseSchema",
    "UpstreamSchema",
    "TimestampMixin",
    "BaseFilterSchema",
    "coerce_reference",
]


class BaseSchema(BaseModel):
    """
    Base schema with common Pydantic configuration.

    All application-facing schemas should inherit from this to ensure
    consistent behaviour.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        # Keep enums as Enum instances; callers can still access `.value`.
        use_enum_values=False,
        str_strip_whitespace=True,
        validate_assignment=True,
    )


class UpstreamSchema(BaseSchema):
    """
    Base for records read from the document-store backend.

    The backend adds bookkeeping keys (``__v`` and friends) that are not
    part of the record shape, so unknown keys are ignored.
    """

    model_config = ConfigDict(extra="ignore")


class TimestampMixin(BaseModel):
    """Mixin for the backend's camelCase timestamp fields."""

    created_at: Optional[datetime] = Field(
        default=None,
        alias="createdAt",
        description="Creation timestamp",
    )
    updated_at: Optional[datetime] = Field(
        default=None,
        alias="updatedAt",
        description="Last update timestamp",
    )


class BaseFilterSchema(BaseSchema):
    """Base schema for filter parameters."""
    pass


def coerce_reference(value: Any) -> Any:
    """
    Reduce a populated reference (``{"_id": ..., ...}``) to its id.

    The backend returns either a bare ObjectId string or the populated
    document depending on the endpoint.
    """
    if isinstance(value, dict):
        return value.get("_id") or value.get("id")
    return value
