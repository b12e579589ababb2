"""
Common schemas shared across all domains.
"""

from hostelia.schemas.common.base import (
    BaseFilterSchema,
    BaseSchema,
    TimestampMixin,
    UpstreamSchema,
    coerce_reference,
)
from hostelia.schemas.common.enums import (
    AcademicYear,
    ComplaintCategory,
    ComplaintStatus,
    DayOfWeek,
    FeeReviewDecision,
    FeeStatus,
    FeeType,
    Hostel,
    MealType,
    StageStatus,
    StudentVerificationStatus,
    TransitStatus,
    UserRole,
)
from hostelia.schemas.common.filters import clean_filter_value, merge_query_params
from hostelia.schemas.common.pagination import (
    PaginatedResponse,
    PaginationMeta,
    PaginationParams,
)
from hostelia.schemas.common.response import (
    ErrorDetail,
    ErrorResponse,
    SuccessResponse,
)

__all__ = [
    # Base
    "BaseSchema",
    "UpstreamSchema",
    "TimestampMixin",
    "BaseFilterSchema",
    "coerce_reference",
    # Enums
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
    # Filters
    "clean_filter_value",
    "merge_query_params",
    # Pagination
    "PaginationParams",
    "PaginationMeta",
    "PaginatedResponse",
    # Responses
    "SuccessResponse",
    "ErrorDetail",
    "ErrorResponse",
]
