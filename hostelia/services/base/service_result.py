"""
Result type returned by every service operation.

Routers call ``unwrap()``; a failed result re-raises as the application
exception it was built from so the error handlers keep its status code.
"""

from typing import TypeVar, Generic, Optional, Any, Dict
from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone

from hostelia.core.exceptions import BaseAppException, ErrorCode


class ErrorSeverity(str, Enum):
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass
class ServiceError:
    """Failure payload carried by a ServiceResult."""

    code: ErrorCode
    message: str
    status_code: int = 500
    severity: ErrorSeverity = ErrorSeverity.ERROR
    details: Dict[str, Any] = field(default_factory=dict)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_exception(cls, exc: BaseAppException) -> "ServiceError":
        # 4xx are caller mistakes, 5xx are ours or the backend's
        severity = ErrorSeverity.WARNING if exc.status_code < 500 else ErrorSeverity.ERROR
        return cls(
            code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            severity=severity,
            details=dict(exc.details),
        )

    def to_exception(self) -> BaseAppException:
        return BaseAppException(
            self.message,
            error_code=self.code,
            details=self.details,
            status_code=self.status_code,
        )


TData = TypeVar("TData")


@dataclass
class ServiceResult(Generic[TData]):
    """
    Outcome of a service call.

    Attributes:
        is_success: Whether the operation completed
        data: Payload on success
        error: Failure details otherwise
        message: Short status text shown to the operator
    """

    is_success: bool
    data: Optional[TData] = None
    error: Optional[ServiceError] = None
    message: Optional[str] = None

    @classmethod
    def success(cls, data: Optional[TData] = None, message: Optional[str] = None) -> "ServiceResult[TData]":
        return cls(is_success=True, data=data, message=message)

    @classmethod
    def failure(cls, error: ServiceError) -> "ServiceResult[TData]":
        return cls(is_success=False, error=error, message=error.message)

    @classmethod
    def from_exception(cls, exc: BaseAppException) -> "ServiceResult[TData]":
        return cls.failure(ServiceError.from_exception(exc))

    def unwrap(self) -> TData:
        """
        Return the payload or raise.

        Raises:
            BaseAppException: With the failure's code, status and details
        """
        if self.is_success:
            return self.data
        if self.error is None:
            raise BaseAppException("Service failed without an error")
        raise self.error.to_exception()

    def __bool__(self) -> bool:
        return self.is_success


__all__ = [
    "ErrorSeverity",
    "ServiceError",
    "ServiceResult",
]
