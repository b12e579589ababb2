"""
Unit Tests for the complaint progress timeline
"""
from datetime import datetime, timezone

import pytest

from hostelia.schemas.common.enums import StageStatus
from hostelia.schemas.complaint.complaint_base import Complaint
from hostelia.services.complaint.complaint_timeline import build_complaint_timeline

T0 = datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)
T1 = datetime(2024, 3, 2, 10, 0, tzinfo=timezone.utc)
T2 = datetime(2024, 3, 3, 11, 0, tzinfo=timezone.utc)
T3 = datetime(2024, 3, 4, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def complaint(make_complaint):
    def _build(**overrides) -> Complaint:
        return Complaint.model_validate(make_complaint(**overrides))
    return _build


def labels(stages):
    return [stage.label for stage in stages]


def statuses(stages):
    return [stage.status for stage in stages]


class TestComplaintTimeline:
    """Stages derived from complaint status"""

    def test_pending_complaint(self, complaint):
        """A new complaint is registered and under review"""
        stages = build_complaint_timeline(complaint(status='Pending', createdAt=T0.isoformat()))

        assert labels(stages) == ['Registered', 'Under Review', 'Awaiting Confirmation', 'Resolved']
        assert statuses(stages) == [
            StageStatus.COMPLETED,
            StageStatus.CURRENT,
            StageStatus.PENDING,
            StageStatus.PENDING,
        ]
        assert stages[0].timestamp == T0
        assert stages[1].timestamp is None

    def test_rejected_complaint_stops_after_two_stages(self, complaint):
        stages = build_complaint_timeline(
            complaint(status='Rejected', createdAt=T0.isoformat(), updatedAt=T1.isoformat())
        )

        assert len(stages) == 2
        assert stages[1].label == 'Rejected'
        assert stages[1].status == StageStatus.REJECTED
        assert stages[1].timestamp == T1

    def test_awaiting_confirmation(self, complaint):
        """Warden marked it resolved, student has not answered yet"""
        stages = build_complaint_timeline(
            complaint(
                status='ToBeConfirmed',
                createdAt=T0.isoformat(),
                updatedAt=T1.isoformat(),
                resolvedAt=T2.isoformat(),
            )
        )

        assert statuses(stages) == [
            StageStatus.COMPLETED,
            StageStatus.COMPLETED,
            StageStatus.CURRENT,
            StageStatus.PENDING,
        ]
        assert stages[1].timestamp == T1
        assert stages[2].timestamp == T2
        assert stages[3].timestamp is None

    def test_resolved_complaint_completes_every_stage(self, complaint):
        stages = build_complaint_timeline(
            complaint(
                status='Resolved',
                studentStatus='Resolved',
                createdAt=T0.isoformat(),
                updatedAt=T1.isoformat(),
                resolvedAt=T2.isoformat(),
                studentVerifiedAt=T3.isoformat(),
            )
        )

        assert all(stage.status == StageStatus.COMPLETED for stage in stages)
        assert [stage.timestamp for stage in stages] == [T0, T1, T2, T3]

    def test_missing_dates_leave_timestamps_empty(self, complaint):
        stages = build_complaint_timeline(complaint(status='Resolved', createdAt=None, updatedAt=None))

        assert len(stages) == 4
        assert stages[0].timestamp is None
        assert stages[3].timestamp is None
