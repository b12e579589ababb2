"""
Fee submission schemas.

A submission holds two independent fee documents (hostel and mess), each
moving through documentNotSubmitted -> pending -> approved / rejected.
Missing documents are filled in at ingestion so callers never see None.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator, model_validator

from hostelia.schemas.common.base import (
    BaseSchema,
    TimestampMixin,
    UpstreamSchema,
    coerce_reference,
)
from hostelia.schemas.common.enums import FeeReviewDecision, FeeStatus, FeeType

__all__ = [
    "FeeDocument",
    "FeeSubmission",
    "FeeStatusUpdate",
]


class FeeDocument(UpstreamSchema):
    """Status of one uploaded fee document."""

    status: FeeStatus = Field(default=FeeStatus.DOCUMENT_NOT_SUBMITTED)
    document_url: Optional[str] = Field(default=None, alias="documentUrl")
    submitted_at: Optional[datetime] = Field(default=None, alias="submittedAt")
    rejection_reason: Optional[str] = Field(default=None, alias="rejectionReason")

    @model_validator(mode="before")
    @classmethod
    def normalize_document(cls, data):
        """
        Drop fields that cannot coexist with the stored status:
        no URL before a document exists, no reason unless rejected.
        """
        if data is None:
            return {}
        if not isinstance(data, dict):
            return data

        data = dict(data)
        status = data.get("status") or FeeStatus.DOCUMENT_NOT_SUBMITTED.value
        status = getattr(status, "value", status)
        if status == FeeStatus.DOCUMENT_NOT_SUBMITTED.value:
            data.pop("documentUrl", None)
            data.pop("document_url", None)
        if status != FeeStatus.REJECTED.value:
            data.pop("rejectionReason", None)
            data.pop("rejection_reason", None)
        return data

    @property
    def is_submitted(self) -> bool:
        return self.status != FeeStatus.DOCUMENT_NOT_SUBMITTED


class FeeSubmission(UpstreamSchema, TimestampMixin):
    """A student's fee documents for hostel and mess dues."""

    id: Optional[str] = Field(default=None, alias="_id")
    student_id: str = Field(..., alias="studentId")
    student_name: str = Field(default="", alias="studentName")
    student_email: str = Field(default="", alias="studentEmail")
    hostel_fee: FeeDocument = Field(default_factory=FeeDocument, alias="hostelFee")
    mess_fee: FeeDocument = Field(default_factory=FeeDocument, alias="messFee")

    @field_validator("student_id", mode="before")
    @classmethod
    def extract_student_id(cls, v):
        return coerce_reference(v)

    @field_validator("hostel_fee", "mess_fee", mode="before")
    @classmethod
    def default_document(cls, v):
        return {} if v is None else v

    def document(self, fee_type: FeeType) -> FeeDocument:
        return getattr(self, fee_type.field_name)


class FeeStatusUpdate(BaseSchema):
    """Approve or reject one fee document of a student's submission."""

    fee_type: FeeType = Field(..., alias="feeType")
    decision: FeeReviewDecision = Field(...)
    rejection_reason: Optional[str] = Field(
        default=None,
        alias="rejectionReason",
        max_length=500,
    )

    @model_validator(mode="after")
    def require_reason_on_rejection(self) -> "FeeStatusUpdate":
        if self.decision == FeeReviewDecision.REJECTED and not self.rejection_reason:
            raise ValueError("A rejection reason is required when rejecting a document")
        return self
