"""
Fee schemas package.
"""

from hostelia.schemas.fee.fee_base import FeeDocument, FeeStatusUpdate, FeeSubmission
from hostelia.schemas.fee.fee_filters import FeeFilterParams

__all__ = [
    "FeeDocument",
    "FeeSubmission",
    "FeeStatusUpdate",
    "FeeFilterParams",
]
