"""
Progress timeline schemas shared by complaints and fee documents.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from hostelia.schemas.common.base import BaseSchema
from hostelia.schemas.common.enums import FeeType, StageStatus

__all__ = [
    "TimelineStage",
    "ComplaintTimeline",
    "FeeTimeline",
]


class TimelineStage(BaseSchema):
    """One display stage; ``timestamp`` is None when the date is unknown."""

    label: str
    status: StageStatus
    timestamp: Optional[datetime] = None


class ComplaintTimeline(BaseSchema):
    complaint_id: str
    stages: List[TimelineStage] = Field(default_factory=list)


class FeeTimeline(BaseSchema):
    student_id: str
    fee_type: FeeType
    stages: List[TimelineStage] = Field(default_factory=list)
