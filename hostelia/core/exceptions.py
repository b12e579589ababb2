"""
Application exceptions.

Every error the service reports to a caller is a BaseAppException subclass
carrying an ErrorCode and the HTTP status it maps to. The handlers in
``hostelia.core.middleware`` render them as the standard error envelope.
"""

from typing import Any, Dict, List, Optional
from enum import Enum


class ErrorCode(str, Enum):
    INTERNAL_ERROR = "INTERNAL_ERROR"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"
    AUTHORIZATION_FAILED = "AUTHORIZATION_FAILED"
    INVALID_STATE_TRANSITION = "INVALID_STATE_TRANSITION"
    EXTERNAL_SERVICE_ERROR = "EXTERNAL_SERVICE_ERROR"
    TIMEOUT_ERROR = "TIMEOUT_ERROR"


class BaseAppException(Exception):
    """Root of the application's exception tree."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code
        super().__init__(message)

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"


class ValidationError(BaseAppException):
    """Input rejected before anything is sent upstream."""

    def __init__(
        self,
        message: str = "Validation failed",
        field_errors: Optional[Dict[str, List[str]]] = None,
        status_code: int = 422,
    ):
        details = {"field_errors": field_errors} if field_errors else {}
        super().__init__(message, ErrorCode.VALIDATION_ERROR, details, status_code)


class ResourceNotFoundError(BaseAppException):

    def __init__(
        self,
        resource_type: str = "Resource",
        resource_id: Optional[str] = None,
        message: Optional[str] = None,
    ):
        if not message:
            message = f"{resource_type} not found"
            if resource_id:
                message += f" (ID: {resource_id})"
        details = {"resource_type": resource_type, "resource_id": resource_id}
        super().__init__(message, ErrorCode.RESOURCE_NOT_FOUND, details, 404)


# --- Backend auth ----------------------------------------------------------------

class AuthenticationError(BaseAppException):
    """Bearer token missing, expired or rejected by the backend."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, ErrorCode.AUTHENTICATION_FAILED, None, 401)


class AuthorizationError(BaseAppException):
    """The backend refused the action for the caller's role."""

    def __init__(self, message: str = "Forbidden"):
        super().__init__(message, ErrorCode.AUTHORIZATION_FAILED, None, 403)


# --- Workflow --------------------------------------------------------------------

class InvalidTransitionError(BaseAppException):
    """Requested status is not reachable from the record's current status."""

    def __init__(
        self,
        entity: str,
        current_status: str,
        requested_status: str,
        message: Optional[str] = None,
    ):
        message = message or f"Invalid {entity} status transition from {current_status} to {requested_status}"
        details = {
            "entity": entity,
            "current_status": current_status,
            "requested_status": requested_status,
        }
        super().__init__(message, ErrorCode.INVALID_STATE_TRANSITION, details, 409)


# --- Upstream --------------------------------------------------------------------

class UpstreamServiceError(BaseAppException):
    """The hostel backend failed, timed out or answered with garbage."""

    def __init__(
        self,
        message: str = "Upstream service request failed",
        upstream_status: Optional[int] = None,
        path: Optional[str] = None,
        error_code: ErrorCode = ErrorCode.EXTERNAL_SERVICE_ERROR,
        status_code: int = 502,
    ):
        details = {"upstream_status": upstream_status, "path": path}
        super().__init__(message, error_code, details, status_code)


__all__ = [
    "ErrorCode",
    "BaseAppException",
    "ValidationError",
    "ResourceNotFoundError",
    "AuthenticationError",
    "AuthorizationError",
    "InvalidTransitionError",
    "UpstreamServiceError",
]
