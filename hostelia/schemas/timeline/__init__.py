"""
Timeline schemas package.
"""

from hostelia.schemas.timeline.timeline_base import ComplaintTimeline, FeeTimeline, TimelineStage

__all__ = ["TimelineStage", "ComplaintTimeline", "FeeTimeline"]
