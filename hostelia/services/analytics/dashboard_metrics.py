"""
Dashboard metric reductions.

Pure functions over in-memory collections. Every average that is shown
to users is returned preformatted, and an empty input yields a defined
placeholder instead of NaN.
"""

from collections import Counter
from datetime import date, datetime, timezone
from typing import Dict, Iterable, List, Optional, Sequence

from hostelia.core.constants import NEGATIVE_RATING_THRESHOLD, POSITIVE_RATING_THRESHOLD
from hostelia.schemas.common.enums import (
    ComplaintStatus,
    DayOfWeek,
    FeeStatus,
    FeeType,
    MealType,
    TransitStatus,
)
from hostelia.schemas.complaint.complaint_base import Complaint
from hostelia.schemas.dashboard.dashboard_metrics import (
    CategoryCount,
    ComplaintAnalytics,
    ComplaintCounts,
    FeeAggregateOverview,
    FeeTypeStats,
    MessFeedbackSummary,
    StudentStats,
    TransitStats,
)
from hostelia.schemas.fee.fee_base import FeeSubmission
from hostelia.schemas.mess.mess_base import MessFeedback
from hostelia.schemas.transit.transit_base import TransitEntry
from hostelia.schemas.user.user_base import User

SECONDS_PER_DAY = 60 * 60 * 24


def _today(today: Optional[date]) -> date:
    return today or datetime.now(timezone.utc).date()


def _utc_date(value: Optional[datetime]) -> Optional[date]:
    if value is None:
        return None
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.date()


def _mean(values: Sequence[float]) -> Optional[float]:
    return sum(values) / len(values) if values else None


# ---------------------------------------------------------------------------
# Complaints
# ---------------------------------------------------------------------------

def count_complaints(complaints: Iterable[Complaint]) -> ComplaintCounts:
    statuses = Counter(c.status for c in complaints)
    return ComplaintCounts(
        total=sum(statuses.values()),
        pending=statuses[ComplaintStatus.PENDING],
        awaiting=statuses[ComplaintStatus.TO_BE_CONFIRMED],
        resolved=statuses[ComplaintStatus.RESOLVED],
        rejected=statuses[ComplaintStatus.REJECTED],
    )


def average_resolution_days(complaints: Iterable[Complaint]) -> str:
    """Mean days from creation to ``resolved_at``, one decimal; "0.0" when none resolved."""
    durations = [
        (c.resolved_at - c.created_at).total_seconds() / SECONDS_PER_DAY
        for c in complaints
        if c.resolved_at is not None and c.created_at is not None
    ]
    avg = _mean(durations)
    return f"{avg:.1f}" if avg is not None else "0.0"


def complaints_by_category(complaints: Iterable[Complaint]) -> List[CategoryCount]:
    counts = Counter(c.category.value for c in complaints)
    return [CategoryCount(category=name, count=n) for name, n in counts.most_common()]


def complaints_by_status(complaints: Iterable[Complaint]) -> Dict[str, int]:
    counts = Counter(c.status.value for c in complaints)
    return {status.value: counts[status.value] for status in ComplaintStatus}


def compute_complaint_analytics(complaints: Sequence[Complaint]) -> ComplaintAnalytics:
    return ComplaintAnalytics(
        counts=count_complaints(complaints),
        avg_resolution_days=average_resolution_days(complaints),
        by_category=complaints_by_category(complaints),
        by_status=complaints_by_status(complaints),
    )


def recent_complaints(complaints: Sequence[Complaint], limit: int) -> List[Complaint]:
    """Newest first; complaints without a creation date sort last."""
    floor = datetime.min.replace(tzinfo=timezone.utc)

    def created(c: Complaint) -> datetime:
        if c.created_at is None:
            return floor
        return c.created_at if c.created_at.tzinfo else c.created_at.replace(tzinfo=timezone.utc)

    return sorted(complaints, key=created, reverse=True)[:limit]


# ---------------------------------------------------------------------------
# Mess feedback
# ---------------------------------------------------------------------------

def average_rating(feedbacks: Sequence[MessFeedback]) -> str:
    """Mean rating to one decimal, "0.0" for no feedback."""
    avg = _mean([f.rating for f in feedbacks])
    return f"{avg:.1f}" if avg is not None else "0.0"


def _feedback_day(feedback: MessFeedback) -> Optional[str]:
    if feedback.day is not None:
        return feedback.day.value
    when = feedback.date or feedback.created_at
    return when.strftime("%A") if when else None


def summarize_mess_feedback(
    feedbacks: Sequence[MessFeedback],
    today: Optional[date] = None,
) -> MessFeedbackSummary:
    """
    Summarise ratings: overall average, positive / negative counts, today's
    average, and per-meal and per-day averages rounded to two places.
    """
    today = _today(today)
    todays = [f for f in feedbacks if _utc_date(f.created_at) == today]
    today_avg = _mean([f.rating for f in todays])

    by_meal = {}
    for meal in MealType:
        avg = _mean([f.rating for f in feedbacks if f.meal_type == meal])
        by_meal[meal.value] = round(avg, 2) if avg is not None else 0.0

    by_day = {}
    for day in DayOfWeek:
        avg = _mean([f.rating for f in feedbacks if _feedback_day(f) == day.value])
        by_day[day.value] = round(avg, 2) if avg is not None else 0.0

    return MessFeedbackSummary(
        total=len(feedbacks),
        avg_rating=average_rating(feedbacks),
        positive=sum(1 for f in feedbacks if f.rating >= POSITIVE_RATING_THRESHOLD),
        negative=sum(1 for f in feedbacks if f.rating <= NEGATIVE_RATING_THRESHOLD),
        today_count=len(todays),
        today_avg=f"{today_avg:.1f}" if today_avg is not None else "N/A",
        by_meal=by_meal,
        by_day=by_day,
    )


# ---------------------------------------------------------------------------
# Fees
# ---------------------------------------------------------------------------

def compute_fee_type_stats(fees: Sequence[FeeSubmission], fee_type: FeeType) -> FeeTypeStats:
    """Counts per status for one fee type; collection rate is approved / all submissions."""
    statuses = Counter(fee.document(fee_type).status for fee in fees)
    total = len(fees)
    approved = statuses[FeeStatus.APPROVED]
    return FeeTypeStats(
        total=total,
        pending=statuses[FeeStatus.PENDING],
        approved=approved,
        rejected=statuses[FeeStatus.REJECTED],
        not_submitted=statuses[FeeStatus.DOCUMENT_NOT_SUBMITTED],
        collection_rate=f"{approved / total * 100:.1f}" if total else "0",
    )


def compute_fee_overview(fees: Sequence[FeeSubmission]) -> FeeAggregateOverview:
    return FeeAggregateOverview(
        hostel_fee=compute_fee_type_stats(fees, FeeType.HOSTEL),
        mess_fee=compute_fee_type_stats(fees, FeeType.MESS),
    )


# ---------------------------------------------------------------------------
# Students
# ---------------------------------------------------------------------------

def compute_student_stats(students: Sequence[User]) -> StudentStats:
    years = Counter(s.year.value for s in students if s.year is not None)
    rooms = {s.room_no for s in students if s.room_no}
    total = len(students)
    most_common = years.most_common(1)
    return StudentStats(
        total=total,
        by_year=dict(years),
        occupied_rooms=len(rooms),
        avg_per_room=f"{total / len(rooms):.1f}" if rooms else "0",
        most_populated_year=most_common[0][0] if most_common else None,
    )


# ---------------------------------------------------------------------------
# Transit
# ---------------------------------------------------------------------------

def _transit_moment(entry: TransitEntry) -> datetime:
    when = entry.created_at or entry.date or datetime.min
    return when if when.tzinfo else when.replace(tzinfo=timezone.utc)


def compute_transit_stats(entries: Sequence[TransitEntry], today: Optional[date] = None) -> TransitStats:
    """
    Gate totals. A student is out when their most recent record is an EXIT.
    """
    today = _today(today)
    latest: Dict[str, TransitEntry] = {}
    for entry in entries:
        if entry.student is None:
            continue
        current = latest.get(entry.student.id)
        if current is None or _transit_moment(entry) > _transit_moment(current):
            latest[entry.student.id] = entry

    statuses = Counter(e.transit_status for e in entries)
    return TransitStats(
        total=len(entries),
        entries=statuses[TransitStatus.ENTRY],
        exits=statuses[TransitStatus.EXIT],
        currently_out=sum(1 for e in latest.values() if e.transit_status == TransitStatus.EXIT),
        today=sum(1 for e in entries if _utc_date(e.date or e.created_at) == today),
    )


__all__ = [
    "count_complaints",
    "average_resolution_days",
    "complaints_by_category",
    "complaints_by_status",
    "compute_complaint_analytics",
    "recent_complaints",
    "average_rating",
    "summarize_mess_feedback",
    "compute_fee_type_stats",
    "compute_fee_overview",
    "compute_student_stats",
    "compute_transit_stats",
]
