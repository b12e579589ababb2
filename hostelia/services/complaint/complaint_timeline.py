"""
Progress timeline for a complaint.
"""

from typing import List

from hostelia.schemas.common.enums import ComplaintStatus, StageStatus
from hostelia.schemas.complaint.complaint_base import Complaint
from hostelia.schemas.timeline.timeline_base import TimelineStage

REGISTERED = "Registered"
UNDER_REVIEW = "Under Review"
REJECTED = "Rejected"
AWAITING_CONFIRMATION = "Awaiting Confirmation"
RESOLVED = "Resolved"


def build_complaint_timeline(complaint: Complaint) -> List[TimelineStage]:
    """
    Derive the display stages for a complaint.

    Rejected complaints stop after two stages; every other status yields
    four. A stage that is still current or pending carries no timestamp,
    except Awaiting Confirmation which shows when the warden resolved it.
    """
    status = complaint.status
    stages = [
        TimelineStage(label=REGISTERED, status=StageStatus.COMPLETED, timestamp=complaint.created_at),
    ]

    if status == ComplaintStatus.PENDING:
        stages.append(TimelineStage(label=UNDER_REVIEW, status=StageStatus.CURRENT))
    elif status == ComplaintStatus.REJECTED:
        stages.append(
            TimelineStage(label=REJECTED, status=StageStatus.REJECTED, timestamp=complaint.updated_at)
        )
        return stages
    else:
        stages.append(
            TimelineStage(label=UNDER_REVIEW, status=StageStatus.COMPLETED, timestamp=complaint.updated_at)
        )

    if status == ComplaintStatus.TO_BE_CONFIRMED:
        stages += [
            TimelineStage(
                label=AWAITING_CONFIRMATION,
                status=StageStatus.CURRENT,
                timestamp=complaint.resolved_at,
            ),
            TimelineStage(label=RESOLVED, status=StageStatus.PENDING),
        ]
    elif status == ComplaintStatus.RESOLVED:
        stages += [
            TimelineStage(
                label=AWAITING_CONFIRMATION,
                status=StageStatus.COMPLETED,
                timestamp=complaint.resolved_at,
            ),
            TimelineStage(
                label=RESOLVED,
                status=StageStatus.COMPLETED,
                timestamp=complaint.student_verified_at,
            ),
        ]
    else:
        stages += [
            TimelineStage(label=AWAITING_CONFIRMATION, status=StageStatus.PENDING),
            TimelineStage(label=RESOLVED, status=StageStatus.PENDING),
        ]

    return stages


__all__ = ["build_complaint_timeline"]
