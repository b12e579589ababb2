"""
Role dashboards.

Each dashboard issues its backend reads concurrently and reduces them once
per request.
"""

import asyncio
from datetime import date
from typing import List, Optional

from hostelia.core.constants import RECENT_ITEMS_LIMIT
from hostelia.core.exceptions import ValidationError
from hostelia.schemas.dashboard.dashboard_metrics import (
    FeeStatusOverview,
    StaffDashboard,
    StudentDashboard,
)
from hostelia.schemas.fee.fee_base import FeeSubmission
from hostelia.services.analytics.dashboard_metrics import (
    compute_fee_overview,
    compute_student_stats,
    count_complaints,
    recent_complaints,
    summarize_mess_feedback,
)
from hostelia.services.announcement.announcement_service import AnnouncementService
from hostelia.services.base.base_service import BaseService
from hostelia.services.base.service_result import ServiceResult
from hostelia.services.complaint.complaint_service import ComplaintService
from hostelia.services.fee.fee_service import FeeService
from hostelia.services.mess.mess_service import MessService
from hostelia.services.users.user_directory_service import UserDirectoryService


def own_fee_overview(fees: List[FeeSubmission], student_id: Optional[str] = None) -> FeeStatusOverview:
    """
    The student's own documents.

    For a student caller the backend scopes ``/fee`` to them, so a single
    record without an id is theirs. Staff callers see every submission and
    must name the student. No record at all means nothing was submitted yet.

    Raises:
        ValidationError: No ``student_id`` and more than one record returned
    """
    submission = None
    if student_id is not None:
        submission = next((f for f in fees if f.student_id == student_id), None)
    elif len(fees) > 1:
        raise ValidationError(
            "student_id is required when several fee records are visible",
            field_errors={"student_id": ["required for staff callers"]},
        )
    elif fees:
        submission = fees[0]

    if submission is None:
        return FeeStatusOverview()
    return FeeStatusOverview(hostel_fee=submission.hostel_fee, mess_fee=submission.mess_fee)


class DashboardService(BaseService):
    """Aggregated views for the student and staff dashboards."""

    def __init__(self, client):
        super().__init__(client)
        self._complaints = ComplaintService(client)
        self._fees = FeeService(client)
        self._users = UserDirectoryService(client)
        self._mess = MessService(client)
        self._announcements = AnnouncementService(client)

    async def student_dashboard(self, student_id: Optional[str] = None) -> ServiceResult[StudentDashboard]:
        try:
            complaints, fees, announcements = await asyncio.gather(
                self._complaints.fetch_all(),
                self._fees.fetch_all(),
                self._announcements.fetch_all(),
            )
            return ServiceResult.success(
                StudentDashboard(
                    complaints=count_complaints(complaints),
                    fees=own_fee_overview(fees, student_id),
                    recent_complaints=recent_complaints(complaints, RECENT_ITEMS_LIMIT),
                    announcements=announcements[:RECENT_ITEMS_LIMIT],
                )
            )
        except Exception as e:
            return self._handle_exception(e, "build student dashboard", student_id)

    async def staff_dashboard(self, today: Optional[date] = None) -> ServiceResult[StaffDashboard]:
        try:
            complaints, students, fees, feedbacks = await asyncio.gather(
                self._complaints.fetch_all(),
                self._users.fetch_students(),
                self._fees.fetch_all(),
                self._mess.fetch_feedback_or_empty(),
            )
            return ServiceResult.success(
                StaffDashboard(
                    complaints=count_complaints(complaints),
                    students=len(students),
                    student_stats=compute_student_stats(students),
                    fees=compute_fee_overview(fees),
                    mess_feedback=summarize_mess_feedback(feedbacks, today),
                    recent_complaints=recent_complaints(complaints, RECENT_ITEMS_LIMIT),
                )
            )
        except Exception as e:
            return self._handle_exception(e, "build staff dashboard")


__all__ = ["DashboardService", "own_fee_overview"]
