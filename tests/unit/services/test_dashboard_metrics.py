"""
Unit Tests for dashboard metric reductions
"""
from datetime import date

import pytest

from hostelia.core.exceptions import ValidationError
from hostelia.schemas.common.enums import FeeType
from hostelia.schemas.complaint.complaint_base import Complaint
from hostelia.schemas.fee.fee_base import FeeSubmission
from hostelia.schemas.mess.mess_base import MessFeedback
from hostelia.schemas.transit.transit_base import TransitEntry
from hostelia.schemas.user.user_base import User
from hostelia.services.analytics.dashboard_metrics import (
    average_rating,
    average_resolution_days,
    complaints_by_category,
    complaints_by_status,
    compute_fee_overview,
    compute_fee_type_stats,
    compute_student_stats,
    compute_transit_stats,
    count_complaints,
    recent_complaints,
    summarize_mess_feedback,
)
from hostelia.services.analytics.dashboard_service import own_fee_overview

MONDAY = date(2024, 3, 4)


class TestComplaintMetrics:
    """Complaint counts and analytics"""

    def test_counts_by_status(self, make_complaint):
        complaints = [
            Complaint.model_validate(make_complaint(status=status))
            for status in ['Pending', 'Pending', 'ToBeConfirmed', 'Resolved', 'Rejected']
        ]

        counts = count_complaints(complaints)

        assert counts.total == 5
        assert counts.pending == 2
        assert counts.awaiting == 1
        assert counts.resolved == 1
        assert counts.rejected == 1

    def test_empty_counts(self):
        counts = count_complaints([])

        assert counts.total == 0
        assert counts.pending == 0

    def test_average_resolution_days(self, make_complaint):
        complaints = [
            Complaint.model_validate(make_complaint(
                createdAt='2024-03-01T00:00:00Z', resolvedAt='2024-03-02T00:00:00Z', status='Resolved',
            )),
            Complaint.model_validate(make_complaint(
                createdAt='2024-03-01T00:00:00Z', resolvedAt='2024-03-04T00:00:00Z', status='ToBeConfirmed',
            )),
            Complaint.model_validate(make_complaint(status='Pending')),
        ]

        assert average_resolution_days(complaints) == '2.0'

    def test_average_resolution_days_without_resolutions(self, make_complaint):
        assert average_resolution_days([Complaint.model_validate(make_complaint())]) == '0.0'

    def test_categories_most_common_first(self, make_complaint):
        complaints = [
            Complaint.model_validate(make_complaint(category=category))
            for category in ['Plumbing', 'Electrical', 'Plumbing', 'Internet', 'Plumbing', 'Internet']
        ]

        by_category = complaints_by_category(complaints)

        assert [(c.category, c.count) for c in by_category] == [
            ('Plumbing', 3),
            ('Internet', 2),
            ('Electrical', 1),
        ]

    def test_status_breakdown_lists_every_status(self, make_complaint):
        by_status = complaints_by_status([Complaint.model_validate(make_complaint(status='Resolved'))])

        assert by_status == {'Pending': 0, 'ToBeConfirmed': 0, 'Resolved': 1, 'Rejected': 0}

    def test_recent_complaints_newest_first(self, make_complaint):
        complaints = [
            Complaint.model_validate(make_complaint(_id=str(day), createdAt=f'2024-03-0{day}T10:00:00Z'))
            for day in [3, 1, 5, 2, 4]
        ]
        undated = Complaint.model_validate(make_complaint(_id='undated', createdAt=None))

        recent = recent_complaints(complaints + [undated], 3)

        assert [c.id for c in recent] == ['5', '4', '3']


class TestMessFeedbackSummary:
    """Ratings summary"""

    def test_average_rating_of_empty_feedback(self):
        assert average_rating([]) == '0.0'

    def test_empty_summary_has_placeholders(self):
        summary = summarize_mess_feedback([], today=MONDAY)

        assert summary.total == 0
        assert summary.avg_rating == '0.0'
        assert summary.today_avg == 'N/A'
        assert summary.by_meal == {'Breakfast': 0.0, 'Lunch': 0.0, 'Snacks': 0.0, 'Dinner': 0.0}
        assert set(summary.by_day) == {
            'Sunday', 'Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday',
        }

    def test_summary(self, make_feedback):
        feedbacks = [
            MessFeedback.model_validate(make_feedback(rating=5, mealType='Lunch')),
            MessFeedback.model_validate(make_feedback(rating=4, mealType='Lunch')),
            MessFeedback.model_validate(make_feedback(rating=1, mealType='Dinner')),
            MessFeedback.model_validate(make_feedback(
                rating=2, mealType='Breakfast', day='Sunday', createdAt='2024-03-03T08:00:00Z',
            )),
        ]

        summary = summarize_mess_feedback(feedbacks, today=MONDAY)

        assert summary.total == 4
        assert summary.avg_rating == '3.0'
        assert summary.positive == 2
        assert summary.negative == 2
        assert summary.today_count == 3
        assert summary.today_avg == '3.3'
        assert summary.by_meal['Lunch'] == 4.5
        assert summary.by_meal['Snacks'] == 0.0
        assert summary.by_day['Monday'] == 3.33
        assert summary.by_day['Sunday'] == 2.0

    def test_day_falls_back_to_date(self, make_feedback):
        feedback = MessFeedback.model_validate(make_feedback(day=None, date='2024-03-06T00:00:00Z', rating=3))

        summary = summarize_mess_feedback([feedback], today=MONDAY)

        assert summary.by_day['Wednesday'] == 3.0


class TestFeeMetrics:
    """Fee status aggregation"""

    def test_type_stats(self, make_fee):
        fees = [
            FeeSubmission.model_validate(make_fee(hostelFee={'status': status}))
            for status in ['approved', 'approved', 'pending', 'rejected']
        ]

        stats = compute_fee_type_stats(fees, FeeType.HOSTEL)

        assert stats.total == 4
        assert stats.approved == 2
        assert stats.pending == 1
        assert stats.rejected == 1
        assert stats.not_submitted == 0
        assert stats.collection_rate == '50.0'

    def test_collection_rate_of_no_fees(self):
        assert compute_fee_type_stats([], FeeType.MESS).collection_rate == '0'

    def test_overview_is_tagged_aggregate(self, make_fee):
        overview = compute_fee_overview([FeeSubmission.model_validate(make_fee())])

        assert overview.kind == 'aggregate'
        assert overview.mess_fee.not_submitted == 1

    def test_own_overview_is_tagged_status(self, make_fee):
        fee = FeeSubmission.model_validate(make_fee(hostelFee={'status': 'pending'}))

        overview = own_fee_overview([fee], fee.student_id)

        assert overview.kind == 'status'
        assert overview.hostel_fee.status.value == 'pending'
        assert overview.mess_fee.status.value == 'documentNotSubmitted'

    def test_own_overview_without_record(self):
        overview = own_fee_overview([], 'missing')

        assert overview.hostel_fee.status.value == 'documentNotSubmitted'

    def test_own_overview_single_record_without_id(self, make_fee):
        fee = FeeSubmission.model_validate(make_fee(messFee={'status': 'approved'}))

        assert own_fee_overview([fee]).mess_fee.status.value == 'approved'

    def test_own_overview_requires_id_for_several_records(self, make_fee):
        fees = [FeeSubmission.model_validate(make_fee()) for _ in range(2)]

        with pytest.raises(ValidationError) as exc_info:
            own_fee_overview(fees)
        assert 'student_id' in exc_info.value.details['field_errors']


class TestStudentStats:

    def test_stats(self, make_student):
        students = [
            User.model_validate(make_student(year='UG-1', roomNo='101')),
            User.model_validate(make_student(year='UG-1', roomNo='101')),
            User.model_validate(make_student(year='UG-3', roomNo='102')),
        ]

        stats = compute_student_stats(students)

        assert stats.total == 3
        assert stats.by_year == {'UG-1': 2, 'UG-3': 1}
        assert stats.occupied_rooms == 2
        assert stats.avg_per_room == '1.5'
        assert stats.most_populated_year == 'UG-1'

    def test_no_students(self):
        stats = compute_student_stats([])

        assert stats.avg_per_room == '0'
        assert stats.most_populated_year is None


class TestTransitStats:

    def test_latest_record_decides_who_is_out(self, make_transit):
        alice = {'_id': 'a' * 24, 'name': 'Alice'}
        bob = {'_id': 'b' * 24, 'name': 'Bob'}
        entries = [
            TransitEntry.model_validate(make_transit(
                studentId=alice, transitStatus='EXIT', createdAt='2024-03-04T08:00:00Z',
            )),
            TransitEntry.model_validate(make_transit(
                studentId=alice, transitStatus='ENTRY', createdAt='2024-03-04T20:00:00Z',
            )),
            TransitEntry.model_validate(make_transit(
                studentId=bob, transitStatus='EXIT', createdAt='2024-03-04T19:00:00Z',
            )),
            TransitEntry.model_validate(make_transit(
                studentId=bob, transitStatus='EXIT', date='2024-03-01T00:00:00Z',
                createdAt='2024-03-01T09:00:00Z',
            )),
        ]

        stats = compute_transit_stats(entries, today=MONDAY)

        assert stats.total == 4
        assert stats.entries == 1
        assert stats.exits == 3
        assert stats.currently_out == 1
        assert stats.today == 3
