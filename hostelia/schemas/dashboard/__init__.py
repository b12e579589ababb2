"""
Dashboard schemas package.
"""

from hostelia.schemas.dashboard.dashboard_metrics import (
    CategoryCount,
    ComplaintAnalytics,
    ComplaintCounts,
    FeeAggregateOverview,
    FeeOverview,
    FeeStatusOverview,
    FeeTypeStats,
    MessFeedbackSummary,
    StaffDashboard,
    StudentDashboard,
    StudentStats,
    TransitStats,
)

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
