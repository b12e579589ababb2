# --- File: hostelia/schemas/common/enums.py ---
"""
All enumeration types used across the application.

Values match the strings stored by the document-store backend, so the
members round-trip unchanged through upstream payloads.
"""

from enum import Enum

__all__ = [
    "UserRole",
    "Hostel",
    "AcademicYear",
    "ComplaintCategory",
    "ComplaintStatus",
    "StudentVerificationStatus",
    "FeeType",
    "FeeStatus",
    "FeeReviewDecision",
    "MealType",
    "DayOfWeek",
    "TransitStatus",
    "StageStatus",
]


class UserRole(str, Enum):
    """User role enumeration."""

    STUDENT = "student"
    WARDEN = "warden"
    ADMIN = "admin"


class Hostel(str, Enum):
    """Hostel blocks."""

    BH_1 = "BH-1"
    BH_2 = "BH-2"
    BH_3 = "BH-3"
    BH_4 = "BH-4"


class AcademicYear(str, Enum):
    UG_1 = "UG-1"
    UG_2 = "UG-2"
    UG_3 = "UG-3"
    UG_4 = "UG-4"


class ComplaintCategory(str, Enum):
    """Complaint category enumeration."""

    ELECTRICAL = "Electrical"
    PLUMBING = "Plumbing"
    PAINTING = "Painting"
    CARPENTRY = "Carpentry"
    CLEANING = "Cleaning"
    INTERNET = "Internet"
    FURNITURE = "Furniture"
    PEST_CONTROL = "Pest Control"
    STUDENT_MISCONDUCT = "Student Misconduct"
    OTHER = "Other"


class ComplaintStatus(str, Enum):
    """Complaint status enumeration."""

    PENDING = "Pending"
    TO_BE_CONFIRMED = "ToBeConfirmed"
    RESOLVED = "Resolved"
    REJECTED = "Rejected"


class StudentVerificationStatus(str, Enum):
    """The student's own verdict on a complaint marked resolved."""

    NOT_RESOLVED = "NotResolved"
    RESOLVED = "Resolved"
    REJECTED = "Rejected"


class FeeType(str, Enum):
    """Fee document kinds held on a submission."""

    HOSTEL = "hostel"
    MESS = "mess"

    @property
    def field_name(self) -> str:
        return "hostel_fee" if self is FeeType.HOSTEL else "mess_fee"


class FeeStatus(str, Enum):
    """Fee document status enumeration."""

    DOCUMENT_NOT_SUBMITTED = "documentNotSubmitted"
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class FeeReviewDecision(str, Enum):
    APPROVED = "approved"
    REJECTED = "rejected"


class MealType(str, Enum):
    """Meal type enumeration."""

    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    SNACKS = "Snacks"
    DINNER = "Dinner"


class DayOfWeek(str, Enum):
    SUNDAY = "Sunday"
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"


class TransitStatus(str, Enum):
    ENTRY = "ENTRY"
    EXIT = "EXIT"


class StageStatus(str, Enum):
    """Display state of one stage in a progress timeline."""

    COMPLETED = "completed"
    CURRENT = "current"
    PENDING = "pending"
    REJECTED = "rejected"
