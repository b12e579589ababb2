"""
Complaint service: listing, timelines, analytics, comments and status changes.

Status changes are checked against the local workflow before they are
forwarded, so an impossible transition fails with 409 without a round trip.
"""

from typing import List, Optional

from hostelia.core.constants import PATH_COMPLAINTS
from hostelia.core.exceptions import ResourceNotFoundError
from hostelia.core.pagination import paginate_items, paginate_locally
from hostelia.integrations.backend_client import extract_object
from hostelia.schemas.common.filters import merge_query_params
from hostelia.schemas.common.pagination import PaginatedResponse, PaginationParams
from hostelia.schemas.complaint.complaint_base import (
    Complaint,
    ComplaintCommentCreate,
    ComplaintStatusUpdate,
    ComplaintVerification,
)
from hostelia.schemas.complaint.complaint_filters import ComplaintFilterParams
from hostelia.schemas.dashboard.dashboard_metrics import ComplaintAnalytics
from hostelia.schemas.timeline.timeline_base import ComplaintTimeline
from hostelia.services.analytics.dashboard_metrics import compute_complaint_analytics
from hostelia.services.base.base_service import BaseService
from hostelia.services.base.service_result import ServiceResult
from hostelia.services.complaint.complaint_timeline import build_complaint_timeline
from hostelia.services.complaint.complaint_workflow import (
    apply_student_verification,
    apply_warden_status,
)

COLLECTION_KEY = "problems"
RECORD_KEY = "problem"


class ComplaintService(BaseService):
    """Complaint operations backed by the ``/problem`` collection."""

    async def fetch_all(self, filters: Optional[ComplaintFilterParams] = None) -> List[Complaint]:
        params = filters.to_query_params() if filters else None
        items = await self.client.fetch_list(PATH_COMPLAINTS, COLLECTION_KEY, params=params)
        return self._parse_many(Complaint, items, "complaint")

    async def _find(self, complaint_id: str) -> Complaint:
        # The backend has no single-complaint read; the scoped list is searched.
        for complaint in await self.fetch_all():
            if complaint.id == complaint_id:
                return complaint
        raise ResourceNotFoundError("Complaint", complaint_id)

    async def list_complaints(
        self,
        filters: ComplaintFilterParams,
        pagination: PaginationParams,
    ) -> ServiceResult[PaginatedResponse[Complaint]]:
        """
        One page of complaints. The backend's own paging is used when it
        reports a total; otherwise the full collection is sliced locally.
        """
        try:
            params = merge_query_params(filters.to_query_params(), pagination.to_query_params())
            collection = await self.client.fetch_collection(
                PATH_COMPLAINTS, COLLECTION_KEY, params=params,
            )
            complaints = self._parse_many(Complaint, collection.items, "complaint")

            if collection.total is not None:
                page = paginate_items(items=complaints, total_items=collection.total, params=pagination)
            else:
                page = paginate_locally(complaints, pagination)
            return ServiceResult.success(page)
        except Exception as e:
            return self._handle_exception(e, "list complaints")

    async def get_complaint(self, complaint_id: str) -> ServiceResult[Complaint]:
        try:
            return ServiceResult.success(await self._find(complaint_id))
        except Exception as e:
            return self._handle_exception(e, "get complaint", complaint_id)

    async def get_timeline(self, complaint_id: str) -> ServiceResult[ComplaintTimeline]:
        try:
            complaint = await self._find(complaint_id)
            return ServiceResult.success(
                ComplaintTimeline(
                    complaint_id=complaint.id,
                    stages=build_complaint_timeline(complaint),
                )
            )
        except Exception as e:
            return self._handle_exception(e, "build complaint timeline", complaint_id)

    async def get_analytics(self, filters: ComplaintFilterParams) -> ServiceResult[ComplaintAnalytics]:
        try:
            complaints = await self.fetch_all(filters)
            return ServiceResult.success(compute_complaint_analytics(complaints))
        except Exception as e:
            return self._handle_exception(e, "compute complaint analytics")

    async def update_status(
        self,
        complaint_id: str,
        update: ComplaintStatusUpdate,
    ) -> ServiceResult[Complaint]:
        try:
            current = await self._find(complaint_id)
            expected = apply_warden_status(current, update.status)

            payload = await self.client.patch(
                f"{PATH_COMPLAINTS}/{complaint_id}/status",
                json={"status": update.status.value},
            )
            updated = self._stored_or(payload, expected)

            self._logger.info(
                "Complaint status updated",
                extra={"complaint_id": complaint_id, "status": updated.status.value},
            )
            return ServiceResult.success(updated, message="Status updated")
        except Exception as e:
            return self._handle_exception(e, "update complaint status", complaint_id)

    async def verify_resolution(
        self,
        complaint_id: str,
        verification: ComplaintVerification,
    ) -> ServiceResult[Complaint]:
        try:
            current = await self._find(complaint_id)
            expected = apply_student_verification(current, verification.student_status)

            payload = await self.client.patch(
                f"{PATH_COMPLAINTS}/{complaint_id}/verify",
                json={"studentStatus": verification.student_status.value},
            )
            updated = self._stored_or(payload, expected)

            self._logger.info(
                "Complaint resolution verified",
                extra={"complaint_id": complaint_id, "student_status": updated.student_status.value},
            )
            return ServiceResult.success(updated, message="Verification updated")
        except Exception as e:
            return self._handle_exception(e, "verify complaint", complaint_id)

    async def add_comment(
        self,
        complaint_id: str,
        comment: ComplaintCommentCreate,
    ) -> ServiceResult[Complaint]:
        """Forward a comment; the backend records the author from the token."""
        try:
            payload = await self.client.post(
                f"{PATH_COMPLAINTS}/{complaint_id}/comments",
                json={"message": comment.message},
            )
            record = extract_object(payload, RECORD_KEY)
            updated = (
                self._parse(Complaint, record, "complaint")
                if record is not None
                else await self._find(complaint_id)
            )
            self._logger.info("Comment added to complaint", extra={"complaint_id": complaint_id})
            return ServiceResult.success(updated, message="Comment added")
        except Exception as e:
            return self._handle_exception(e, "add complaint comment", complaint_id)

    def _stored_or(self, payload, expected: Complaint) -> Complaint:
        """Prefer the record echoed by the backend over the locally derived one."""
        record = extract_object(payload, RECORD_KEY)
        if record is None:
            return expected
        return self._parse(Complaint, record, "complaint")


__all__ = ["ComplaintService"]
