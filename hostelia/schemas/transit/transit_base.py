"""
Hostel gate transit log schemas.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, Field, field_validator

from hostelia.schemas.common.base import TimestampMixin, UpstreamSchema
from hostelia.schemas.common.enums import Hostel, TransitStatus

__all__ = ["TransitStudent", "TransitEntry"]


class TransitStudent(UpstreamSchema):
    id: str = Field(..., alias="_id")
    name: Optional[str] = None
    roll_no: Optional[str] = Field(default=None, alias="rollNo")
    hostel: Optional[Hostel] = None
    room_no: Optional[str] = Field(default=None, alias="roomNo")


class TransitEntry(UpstreamSchema, TimestampMixin):
    """One ENTRY or EXIT record at the hostel gate."""

    id: str = Field(..., alias="_id")
    student: Optional[TransitStudent] = Field(
        default=None,
        validation_alias=AliasChoices("studentId", "student"),
    )
    purpose: str = Field(default="")
    transit_status: TransitStatus = Field(..., alias="transitStatus")
    date: Optional[datetime] = None
    time: Optional[str] = Field(default=None, description="HH:MM:SS")

    @field_validator("student", mode="before")
    @classmethod
    def wrap_bare_reference(cls, v):
        if isinstance(v, str):
            return {"_id": v}
        return v
