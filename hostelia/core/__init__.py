"""
Core application utilities: constants, exceptions, logging, middleware and pagination.
"""

from hostelia.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    BaseAppException,
    ErrorCode,
    InvalidTransitionError,
    ResourceNotFoundError,
    UpstreamServiceError,
    ValidationError,
)
from hostelia.core.logging import get_logger

__all__ = [
    "BaseAppException",
    "ErrorCode",
    "ValidationError",
    "ResourceNotFoundError",
    "AuthenticationError",
    "AuthorizationError",
    "InvalidTransitionError",
    "UpstreamServiceError",
    "get_logger",
]
