"""
Fee services: workflow, timeline and the backend-facing service.
"""

from hostelia.services.fee.fee_service import FeeService, filter_fee_submissions
from hostelia.services.fee.fee_timeline import build_fee_timeline
from hostelia.services.fee.fee_workflow import review_fee_document, submit_fee_document

__all__ = [
    "FeeService",
    "filter_fee_submissions",
    "build_fee_timeline",
    "review_fee_document",
    "submit_fee_document",
]
