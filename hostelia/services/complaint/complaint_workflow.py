"""
Complaint status transitions.

Warden/admin actions and student verification are applied to a Complaint
and return an updated copy; the input is never mutated.
"""

from datetime import datetime, timezone
from typing import Optional

from hostelia.core.exceptions import InvalidTransitionError, ValidationError
from hostelia.schemas.common.enums import ComplaintStatus, StudentVerificationStatus
from hostelia.schemas.complaint.complaint_base import Complaint


def _now(now: Optional[datetime]) -> datetime:
    return now or datetime.now(timezone.utc)


def apply_warden_status(
    complaint: Complaint,
    requested: ComplaintStatus,
    now: Optional[datetime] = None,
) -> Complaint:
    """
    Apply a staff status change.

    Requesting ``Resolved`` parks the complaint in ``ToBeConfirmed`` and
    stamps ``resolved_at``; requesting ``Pending`` resets the student's
    verdict. ``Rejected`` complaints cannot change again.
    """
    if complaint.is_terminal:
        raise InvalidTransitionError("complaint", complaint.status.value, requested.value)

    if requested == ComplaintStatus.RESOLVED:
        return complaint.model_copy(update={
            "status": ComplaintStatus.TO_BE_CONFIRMED,
            "resolved_at": _now(now),
        })

    update = {"status": requested}
    if requested == ComplaintStatus.PENDING:
        update["student_status"] = StudentVerificationStatus.NOT_RESOLVED
    return complaint.model_copy(update=update)


def apply_student_verification(
    complaint: Complaint,
    verdict: StudentVerificationStatus,
    now: Optional[datetime] = None,
) -> Complaint:
    """
    Apply the student's verdict on a complaint awaiting confirmation.

    ``Resolved`` finalises the complaint, ``Rejected`` re-opens it as Pending.
    """
    if not complaint.awaiting_student:
        raise InvalidTransitionError(
            "complaint",
            complaint.status.value,
            verdict.value,
            message="Only complaints awaiting confirmation can be verified",
        )
    if verdict == StudentVerificationStatus.NOT_RESOLVED:
        raise ValidationError(
            "Verification must be Resolved or Rejected",
            field_errors={"student_status": ["must be Resolved or Rejected"]},
        )

    status = (
        ComplaintStatus.RESOLVED
        if verdict == StudentVerificationStatus.RESOLVED
        else ComplaintStatus.PENDING
    )
    return complaint.model_copy(update={
        "status": status,
        "student_status": verdict,
        "student_verified_at": _now(now),
    })


__all__ = ["apply_warden_status", "apply_student_verification"]
