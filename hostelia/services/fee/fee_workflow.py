"""
Fee document transitions.
"""

from datetime import datetime, timezone
from typing import Optional

from hostelia.core.exceptions import InvalidTransitionError, ValidationError
from hostelia.schemas.common.enums import FeeReviewDecision, FeeStatus
from hostelia.schemas.fee.fee_base import FeeDocument

SUBMITTABLE = (FeeStatus.DOCUMENT_NOT_SUBMITTED, FeeStatus.REJECTED)


def submit_fee_document(
    document: FeeDocument,
    document_url: str,
    now: Optional[datetime] = None,
) -> FeeDocument:
    """Record an upload; a rejected document may be resubmitted and loses its reason."""
    if document.status not in SUBMITTABLE:
        raise InvalidTransitionError("fee document", document.status.value, FeeStatus.PENDING.value)
    if not document_url or not document_url.strip():
        raise ValidationError(
            "A document URL is required",
            field_errors={"document_url": ["must not be empty"]},
        )

    return document.model_copy(update={
        "status": FeeStatus.PENDING,
        "document_url": document_url.strip(),
        "submitted_at": now or datetime.now(timezone.utc),
        "rejection_reason": None,
    })


def review_fee_document(
    document: FeeDocument,
    decision: FeeReviewDecision,
    reason: Optional[str] = None,
) -> FeeDocument:
    """Approve or reject a pending document. Rejection needs a reason."""
    if document.status != FeeStatus.PENDING:
        raise InvalidTransitionError("fee document", document.status.value, decision.value)

    if decision == FeeReviewDecision.APPROVED:
        return document.model_copy(update={
            "status": FeeStatus.APPROVED,
            "rejection_reason": None,
        })

    if not reason or not reason.strip():
        raise ValidationError(
            "A rejection reason is required",
            field_errors={"rejection_reason": ["required when rejecting"]},
        )
    return document.model_copy(update={
        "status": FeeStatus.REJECTED,
        "rejection_reason": reason.strip(),
    })


__all__ = ["submit_fee_document", "review_fee_document"]
