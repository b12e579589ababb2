"""
Dashboard metric schemas.

Counts and averages computed over collections fetched from the backend.
Averages that are shown verbatim are carried as preformatted strings
(``"0.0"``, ``"N/A"``) so an empty collection never produces NaN.
"""

from __future__ import annotations

from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import Field

from hostelia.schemas.announcement.announcement_base import Announcement
from hostelia.schemas.common.base import BaseSchema
from hostelia.schemas.complaint.complaint_base import Complaint
from hostelia.schemas.fee.fee_base import FeeDocument

__all__ = [
    "ComplaintCounts",
    "CategoryCount",
    "ComplaintAnalytics",
    "MessFeedbackSummary",
    "FeeTypeStats",
    "FeeStatusOverview",
    "FeeAggregateOverview",
    "FeeOverview",
    "StudentStats",
    "TransitStats",
    "StudentDashboard",
    "StaffDashboard",
]


class ComplaintCounts(BaseSchema):
    total: int = 0
    pending: int = 0
    awaiting: int = Field(default=0, description="Complaints in ToBeConfirmed")
    resolved: int = 0
    rejected: int = 0


class CategoryCount(BaseSchema):
    category: str
    count: int


class ComplaintAnalytics(BaseSchema):
    """Complaint counts with resolution time and breakdowns."""

    counts: ComplaintCounts
    avg_resolution_days: str = Field(
        default="0.0",
        description="Mean days from creation to resolution, one decimal",
    )
    by_category: List[CategoryCount] = Field(
        default_factory=list,
        description="Sorted by count, highest first",
    )
    by_status: Dict[str, int] = Field(default_factory=dict)


class MessFeedbackSummary(BaseSchema):
    total: int = 0
    avg_rating: str = "0.0"
    positive: int = Field(default=0, description="Ratings of 4 or more")
    negative: int = Field(default=0, description="Ratings of 2 or less")
    today_count: int = 0
    today_avg: str = Field(default="N/A", description="N/A when nothing was rated today")
    by_meal: Dict[str, float] = Field(default_factory=dict)
    by_day: Dict[str, float] = Field(default_factory=dict)


class FeeTypeStats(BaseSchema):
    """Aggregate document counts for one fee type."""

    total: int = 0
    pending: int = 0
    approved: int = 0
    rejected: int = 0
    not_submitted: int = 0
    collection_rate: str = Field(
        default="0",
        description="Approved share of all submissions in percent",
    )


class FeeStatusOverview(BaseSchema):
    """A single student's own fee documents."""

    kind: Literal["status"] = "status"
    hostel_fee: FeeDocument = Field(default_factory=FeeDocument)
    mess_fee: FeeDocument = Field(default_factory=FeeDocument)


class FeeAggregateOverview(BaseSchema):
    """Counts across every submission visible to staff."""

    kind: Literal["aggregate"] = "aggregate"
    hostel_fee: FeeTypeStats = Field(default_factory=FeeTypeStats)
    mess_fee: FeeTypeStats = Field(default_factory=FeeTypeStats)


FeeOverview = Annotated[
    Union[FeeStatusOverview, FeeAggregateOverview],
    Field(discriminator="kind"),
]


class StudentStats(BaseSchema):
    total: int = 0
    by_year: Dict[str, int] = Field(default_factory=dict)
    occupied_rooms: int = 0
    avg_per_room: str = "0"
    most_populated_year: Optional[str] = None


class TransitStats(BaseSchema):
    total: int = 0
    entries: int = 0
    exits: int = 0
    currently_out: int = Field(
        default=0,
        description="Students whose latest record is an EXIT",
    )
    today: int = 0


class StudentDashboard(BaseSchema):
    complaints: ComplaintCounts
    fees: FeeOverview
    recent_complaints: List[Complaint] = Field(default_factory=list)
    announcements: List[Announcement] = Field(default_factory=list)


class StaffDashboard(BaseSchema):
    complaints: ComplaintCounts
    students: int = 0
    student_stats: StudentStats = Field(default_factory=StudentStats)
    fees: FeeOverview
    mess_feedback: MessFeedbackSummary = Field(default_factory=MessFeedbackSummary)
    recent_complaints: List[Complaint] = Field(default_factory=list)
