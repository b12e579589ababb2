"""
Progress timeline for one fee document of a submission.
"""

from typing import List

from hostelia.schemas.common.enums import FeeStatus, FeeType, StageStatus
from hostelia.schemas.fee.fee_base import FeeSubmission
from hostelia.schemas.timeline.timeline_base import TimelineStage


def build_fee_timeline(submission: FeeSubmission, fee_type: FeeType) -> List[TimelineStage]:
    """
    Three stages derived from the document status alone.

    The submission time falls back to the record's creation time; the
    final decision is stamped with the record's last update.
    """
    document = submission.document(fee_type)
    status = document.status

    if status == FeeStatus.DOCUMENT_NOT_SUBMITTED:
        return [
            TimelineStage(label="Not Submitted", status=StageStatus.CURRENT),
            TimelineStage(label="Under Review", status=StageStatus.PENDING),
            TimelineStage(label="Approved", status=StageStatus.PENDING),
        ]

    submitted_at = document.submitted_at or submission.created_at
    submitted = TimelineStage(label="Submitted", status=StageStatus.COMPLETED, timestamp=submitted_at)

    if status == FeeStatus.PENDING:
        return [
            submitted,
            TimelineStage(label="Under Review", status=StageStatus.CURRENT),
            TimelineStage(label="Approved", status=StageStatus.PENDING),
        ]

    reviewed = TimelineStage(label="Under Review", status=StageStatus.COMPLETED, timestamp=submitted_at)
    if status == FeeStatus.REJECTED:
        final = TimelineStage(label="Rejected", status=StageStatus.REJECTED, timestamp=submission.updated_at)
    else:
        final = TimelineStage(label="Approved", status=StageStatus.COMPLETED, timestamp=submission.updated_at)
    return [submitted, reviewed, final]


__all__ = ["build_fee_timeline"]
