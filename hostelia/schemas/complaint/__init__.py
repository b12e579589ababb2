"""
Complaint schemas package.
"""

from hostelia.schemas.complaint.complaint_base import (
    Complaint,
    ComplaintComment,
    ComplaintCommentCreate,
    ComplaintStatusUpdate,
    ComplaintVerification,
)
from hostelia.schemas.complaint.complaint_filters import ComplaintFilterParams

__all__ = [
    "Complaint",
    "ComplaintComment",
    "ComplaintCommentCreate",
    "ComplaintStatusUpdate",
    "ComplaintVerification",
    "ComplaintFilterParams",
]
