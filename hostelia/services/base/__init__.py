"""
Base service layer: shared service class and result type.
"""

from hostelia.services.base.base_service import BaseService
from hostelia.services.base.service_result import ErrorSeverity, ServiceError, ServiceResult

__all__ = [
    "BaseService",
    "ServiceResult",
    "ServiceError",
    "ErrorSeverity",
]
