"""
Core complaint schemas.

Complaints are read from the document-store backend, where fields are
camelCase (``problemTitle``, ``roomNo``, ``studentStatus`` ...). Python
attributes are snake_case and the aliases carry the wire names.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from hostelia.schemas.common.base import (
    BaseSchema,
    TimestampMixin,
    UpstreamSchema,
    coerce_reference,
)
from hostelia.schemas.common.enums import (
    ComplaintCategory,
    ComplaintStatus,
    Hostel,
    StudentVerificationStatus,
    UserRole,
)

__all__ = [
    "ComplaintComment",
    "ComplaintCommentCreate",
    "Complaint",
    "ComplaintStatusUpdate",
    "ComplaintVerification",
]


class ComplaintComment(UpstreamSchema):
    """A discussion entry on a complaint."""

    user: str = Field(..., description="Author user ID")
    role: UserRole = Field(..., description="Role of the author when commenting")
    message: str = Field(
        ...,
        min_length=1,
        max_length=2000,
        description="Comment text",
    )
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")

    @field_validator("user", mode="before")
    @classmethod
    def extract_user_id(cls, v):
        return coerce_reference(v)


class ComplaintCommentCreate(BaseSchema):
    """New comment on a complaint; surrounding whitespace is trimmed first."""

    message: str = Field(..., min_length=1, max_length=2000)


class Complaint(UpstreamSchema, TimestampMixin):
    """
    A maintenance complaint raised by a student.

    ``student_status`` only carries meaning once the complaint has reached
    ``ToBeConfirmed``; ``Rejected`` is terminal.
    """

    id: str = Field(..., alias="_id", description="Complaint identifier")
    title: str = Field(..., alias="problemTitle")
    description: str = Field(..., alias="problemDescription")
    image: Optional[str] = Field(
        default=None,
        alias="problemImage",
        description="URL of the uploaded photo",
    )
    category: ComplaintCategory = Field(...)
    hostel: Hostel = Field(...)
    room_no: str = Field(..., alias="roomNo")
    student_id: str = Field(..., alias="studentId")

    status: ComplaintStatus = Field(default=ComplaintStatus.PENDING)
    student_status: StudentVerificationStatus = Field(
        default=StudentVerificationStatus.NOT_RESOLVED,
        alias="studentStatus",
    )
    comments: List[ComplaintComment] = Field(default_factory=list)

    resolved_at: Optional[datetime] = Field(default=None, alias="resolvedAt")
    student_verified_at: Optional[datetime] = Field(
        default=None,
        alias="studentVerifiedAt",
    )

    @field_validator("student_id", mode="before")
    @classmethod
    def extract_student_id(cls, v):
        return coerce_reference(v)

    @field_validator("comments", mode="before")
    @classmethod
    def default_comments(cls, v):
        return v or []

    @property
    def is_terminal(self) -> bool:
        """Rejected complaints accept no further status changes."""
        return self.status == ComplaintStatus.REJECTED

    @property
    def awaiting_student(self) -> bool:
        return self.status == ComplaintStatus.TO_BE_CONFIRMED


class ComplaintStatusUpdate(BaseSchema):
    """
    Status change requested by a warden or admin.

    Requesting ``Resolved`` moves the complaint to ``ToBeConfirmed`` until the
    student verifies it.
    """

    status: ComplaintStatus = Field(..., description="Requested status")


class ComplaintVerification(BaseSchema):
    """Student's verdict on a complaint awaiting confirmation."""

    student_status: StudentVerificationStatus = Field(
        ...,
        alias="studentStatus",
        description="Resolved confirms the fix, Rejected re-opens the complaint",
    )

    @field_validator("student_status")
    @classmethod
    def validate_decision(cls, v: StudentVerificationStatus) -> StudentVerificationStatus:
        if v == StudentVerificationStatus.NOT_RESOLVED:
            raise ValueError("Verification must be Resolved or Rejected")
        return v
