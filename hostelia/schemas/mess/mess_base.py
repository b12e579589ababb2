"""
Mess menu and feedback schemas.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import AliasChoices, Field, field_validator

from hostelia.schemas.common.base import BaseSchema, TimestampMixin, UpstreamSchema
from hostelia.schemas.common.enums import AcademicYear, DayOfWeek, Hostel, MealType

__all__ = [
    "FeedbackAuthor",
    "MessFeedback",
    "MessMenu",
]


class FeedbackAuthor(UpstreamSchema):
    """Populated student reference on a feedback entry."""

    id: str = Field(..., alias="_id")
    name: Optional[str] = None
    email: Optional[str] = None
    roll_no: Optional[str] = Field(default=None, alias="rollNo")
    hostel: Optional[Hostel] = None
    room_no: Optional[str] = Field(default=None, alias="roomNo")
    year: Optional[AcademicYear] = None


class MessFeedback(UpstreamSchema, TimestampMixin):
    """A student's rating of one meal."""

    id: str = Field(..., alias="_id")
    student: Optional[FeedbackAuthor] = Field(
        default=None,
        validation_alias=AliasChoices("studentId", "user", "student"),
    )
    date: Optional[datetime] = None
    day: Optional[DayOfWeek] = None
    meal_type: MealType = Field(..., alias="mealType")
    rating: int = Field(..., ge=1, le=5)
    comment: str = Field(default="")

    @field_validator("student", mode="before")
    @classmethod
    def wrap_bare_reference(cls, v):
        if isinstance(v, str):
            return {"_id": v}
        return v

    @field_validator("comment", mode="before")
    @classmethod
    def default_comment(cls, v):
        return v or ""


class MessMenu(BaseSchema):
    """Weekly menu: day -> meal type -> dishes."""

    days: Dict[DayOfWeek, Dict[MealType, List[str]]] = Field(default_factory=dict)

    @classmethod
    def from_upstream(cls, payload) -> "MessMenu":
        """
        Accept a list of per-day documents (``{day, meals}``) or a mapping
        keyed by day, optionally wrapped in ``default`` as a bundled JSON
        module is. Unknown days and meal types are skipped.
        """
        if isinstance(payload, dict) and isinstance(payload.get("default"), dict):
            payload = payload["default"]
        if isinstance(payload, list):
            payload = {entry.get("day"): entry.get("meals") or {} for entry in payload if isinstance(entry, dict)}

        day_names = {d.value for d in DayOfWeek}
        meal_names = {m.value for m in MealType}
        days = {}
        for day, meals in (payload or {}).items():
            if day not in day_names or not isinstance(meals, dict):
                continue
            days[day] = {
                meal: [str(item) for item in items or []]
                for meal, items in meals.items()
                if meal in meal_names
            }
        return cls(days=days)
