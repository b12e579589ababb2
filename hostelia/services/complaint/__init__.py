"""
Complaint services: workflow, timeline and the backend-facing service.
"""

from hostelia.services.complaint.complaint_service import ComplaintService
from hostelia.services.complaint.complaint_timeline import build_complaint_timeline
from hostelia.services.complaint.complaint_workflow import (
    apply_student_verification,
    apply_warden_status,
)

__all__ = [
    "ComplaintService",
    "build_complaint_timeline",
    "apply_warden_status",
    "apply_student_verification",
]
