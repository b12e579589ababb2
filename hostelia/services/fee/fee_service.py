"""
Fee service: listing, per-document timelines and review decisions.
"""

from typing import Dict, List, Optional

from hostelia.core.constants import PATH_FEES
from hostelia.core.exceptions import ResourceNotFoundError
from hostelia.core.pagination import paginate_locally
from hostelia.integrations.backend_client import extract_object
from hostelia.schemas.common.enums import FeeReviewDecision, FeeType
from hostelia.schemas.common.pagination import PaginatedResponse, PaginationParams
from hostelia.schemas.fee.fee_base import FeeStatusUpdate, FeeSubmission
from hostelia.schemas.fee.fee_filters import FeeFilterParams
from hostelia.schemas.timeline.timeline_base import FeeTimeline
from hostelia.services.base.base_service import BaseService
from hostelia.services.base.service_result import ServiceResult
from hostelia.services.fee.fee_timeline import build_fee_timeline
from hostelia.services.fee.fee_workflow import review_fee_document
from hostelia.services.users.user_directory_service import UserDirectoryService


def filter_fee_submissions(
    fees: List[FeeSubmission],
    filters: FeeFilterParams,
    email_to_hostel: Optional[Dict[str, str]] = None,
) -> List[FeeSubmission]:
    """
    Filter submissions locally.

    With a fee type the status filter applies to that document only;
    without one a submission matches when either document has the status.
    """
    result = fees

    if filters.hostel:
        mapping = email_to_hostel or {}
        result = [f for f in result if mapping.get(f.student_email) == filters.hostel]

    if filters.status:
        if filters.fee_type:
            result = [f for f in result if f.document(filters.fee_type).status == filters.status]
        else:
            result = [
                f for f in result
                if filters.status in (f.hostel_fee.status, f.mess_fee.status)
            ]

    if filters.query:
        needle = filters.query.casefold()
        result = [
            f for f in result
            if needle in f.student_name.casefold() or needle in f.student_email.casefold()
        ]

    return list(result)


class FeeService(BaseService):
    """Fee submission operations backed by ``/fee``."""

    async def fetch_all(self) -> List[FeeSubmission]:
        items = await self.client.fetch_list(PATH_FEES, "feeSubmissions")
        return self._parse_many(FeeSubmission, items, "fee submission")

    async def _find(self, student_id: str) -> FeeSubmission:
        for submission in await self.fetch_all():
            if submission.student_id == student_id:
                return submission
        raise ResourceNotFoundError("Fee submission", student_id)

    async def list_fees(
        self,
        filters: FeeFilterParams,
        pagination: PaginationParams,
    ) -> ServiceResult[PaginatedResponse[FeeSubmission]]:
        try:
            fees = await self.fetch_all()
            mapping = None
            if filters.hostel:
                mapping = await UserDirectoryService(self.client).email_to_hostel()
            filtered = filter_fee_submissions(fees, filters, mapping)
            return ServiceResult.success(paginate_locally(filtered, pagination))
        except Exception as e:
            return self._handle_exception(e, "list fee submissions")

    async def get_timeline(self, student_id: str, fee_type: FeeType) -> ServiceResult[FeeTimeline]:
        try:
            submission = await self._find(student_id)
            return ServiceResult.success(
                FeeTimeline(
                    student_id=student_id,
                    fee_type=fee_type,
                    stages=build_fee_timeline(submission, fee_type),
                )
            )
        except Exception as e:
            return self._handle_exception(e, "build fee timeline", student_id)

    async def update_status(
        self,
        student_id: str,
        update: FeeStatusUpdate,
    ) -> ServiceResult[FeeSubmission]:
        try:
            submission = await self._find(student_id)
            reviewed = review_fee_document(
                submission.document(update.fee_type),
                update.decision,
                update.rejection_reason,
            )

            body = {f"{update.fee_type.value}FeeStatus": reviewed.status.value}
            if update.decision == FeeReviewDecision.REJECTED:
                body["rejectionReason"] = reviewed.rejection_reason

            payload = await self.client.patch(f"{PATH_FEES}/{student_id}/status", json=body)
            record = extract_object(payload, "feeSubmission")
            if record is not None:
                updated = self._parse(FeeSubmission, record, "fee submission")
            else:
                updated = submission.model_copy(update={update.fee_type.field_name: reviewed})

            self._logger.info(
                "Fee status updated",
                extra={
                    "student_id": student_id,
                    "fee_type": update.fee_type.value,
                    "status": reviewed.status.value,
                },
            )
            return ServiceResult.success(updated, message="Fee status updated successfully")
        except Exception as e:
            return self._handle_exception(e, "update fee status", student_id)


__all__ = ["FeeService", "filter_fee_submissions"]
