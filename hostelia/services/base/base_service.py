"""
Base service class providing common functionality for all services.
"""

from typing import Any, Dict, Iterable, List, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from hostelia.core.exceptions import BaseAppException, ErrorCode, UpstreamServiceError
from hostelia.core.logging import get_logger
from hostelia.integrations.backend_client import BackendClient
from hostelia.services.base.service_result import (
    ErrorSeverity,
    ServiceError,
    ServiceResult,
)


TSchema = TypeVar("TSchema", bound=BaseModel)


class BaseService:
    """
    Base service with common behaviors:
    - Shared logger and backend client
    - Consistent error handling via ServiceResult
    """

    def __init__(self, client: BackendClient):
        """
        Initialize base service.

        Args:
            client: Upstream REST client bound to the caller's token
        """
        self.client = client
        self._logger = get_logger(f"hostelia.services.{self.__class__.__name__}").add_context(
            service=self.__class__.__name__,
        )

    def _handle_exception(
        self,
        exception: Exception,
        operation: str,
        entity_ref: Optional[Any] = None,
        additional_context: Optional[Dict[str, Any]] = None,
    ) -> ServiceResult:
        """
        Convert an exception to a ServiceResult failure with logging.

        Application exceptions keep their code and HTTP status; anything
        else is reported as an internal error.
        """
        context = {
            "operation": operation,
            "entity_ref": str(entity_ref) if entity_ref is not None else None,
            "exception_type": type(exception).__name__,
        }
        if additional_context:
            context.update(additional_context)

        if isinstance(exception, BaseAppException):
            log = self._logger.warning if exception.status_code < 500 else self._logger.error
            log(f"{operation} failed: {exception.message}", extra=context)
            return ServiceResult.from_exception(exception)

        self._logger.error(
            f"Error during {operation}: {exception}",
            exc_info=True,
            extra=context,
        )
        return ServiceResult.failure(
            ServiceError(
                code=ErrorCode.INTERNAL_ERROR,
                message=f"Failed to {operation}",
                status_code=500,
                severity=ErrorSeverity.CRITICAL,
                details={"entity_ref": context["entity_ref"]},
            )
        )

    def _parse(self, schema: Type[TSchema], raw: Any, resource: str) -> TSchema:
        """Validate one backend record, reporting malformed data as an upstream fault."""
        try:
            return schema.model_validate(raw)
        except PydanticValidationError as exc:
            self._logger.error(f"Malformed {resource} from backend: {exc.error_count()} errors")
            raise UpstreamServiceError(f"Backend returned a malformed {resource}") from exc

    def _parse_many(self, schema: Type[TSchema], raw_items: Iterable[Any], resource: str) -> List[TSchema]:
        return [self._parse(schema, raw, resource) for raw in raw_items]


__all__ = ["BaseService"]
