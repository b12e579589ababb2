"""
Complaint endpoints: listing, detail, timeline, analytics, comments and status changes.
"""

from fastapi import APIRouter, Depends, status

from hostelia.api import deps
from hostelia.schemas.common.pagination import PaginatedResponse, PaginationParams
from hostelia.schemas.common.response import SuccessResponse
from hostelia.schemas.complaint.complaint_base import (
    Complaint,
    ComplaintCommentCreate,
    ComplaintStatusUpdate,
    ComplaintVerification,
)
from hostelia.schemas.complaint.complaint_filters import ComplaintFilterParams
from hostelia.schemas.dashboard.dashboard_metrics import ComplaintAnalytics
from hostelia.schemas.timeline.timeline_base import ComplaintTimeline
from hostelia.services.complaint.complaint_service import ComplaintService

router = APIRouter(prefix="/complaints", tags=["Complaints"])


@router.get("", response_model=SuccessResponse[PaginatedResponse[Complaint]])
async def list_complaints(
    filters: ComplaintFilterParams = Depends(deps.get_complaint_filters),
    pagination: PaginationParams = Depends(deps.get_pagination_params),
    service: ComplaintService = Depends(deps.get_complaint_service),
):
    """List complaints filtered by hostel, status, category and free text."""
    result = await service.list_complaints(filters, pagination)
    return SuccessResponse.create(result.unwrap())


@router.get("/analytics", response_model=SuccessResponse[ComplaintAnalytics])
async def complaint_analytics(
    filters: ComplaintFilterParams = Depends(deps.get_complaint_filters),
    service: ComplaintService = Depends(deps.get_complaint_service),
):
    """Counts, average resolution time and category/status breakdowns."""
    result = await service.get_analytics(filters)
    return SuccessResponse.create(result.unwrap())


@router.get("/{complaint_id}", response_model=SuccessResponse[Complaint])
async def get_complaint(
    complaint_id: str,
    service: ComplaintService = Depends(deps.get_complaint_service),
):
    result = await service.get_complaint(complaint_id)
    return SuccessResponse.create(result.unwrap())


@router.get("/{complaint_id}/timeline", response_model=SuccessResponse[ComplaintTimeline])
async def get_complaint_timeline(
    complaint_id: str,
    service: ComplaintService = Depends(deps.get_complaint_service),
):
    """Progress stages for the complaint, derived from its current state."""
    result = await service.get_timeline(complaint_id)
    return SuccessResponse.create(result.unwrap())


@router.patch("/{complaint_id}/status", response_model=SuccessResponse[Complaint])
async def update_complaint_status(
    complaint_id: str,
    update: ComplaintStatusUpdate,
    service: ComplaintService = Depends(deps.get_complaint_service),
):
    """
    Warden status change.

    Marking a complaint ``Resolved`` moves it to ``ToBeConfirmed`` until the
    student confirms; ``Rejected`` complaints cannot be changed.
    """
    result = await service.update_status(complaint_id, update)
    return SuccessResponse.create(result.unwrap(), message=result.message or "OK")


@router.patch("/{complaint_id}/verify", response_model=SuccessResponse[Complaint])
async def verify_complaint_resolution(
    complaint_id: str,
    verification: ComplaintVerification,
    service: ComplaintService = Depends(deps.get_complaint_service),
):
    """Student confirmation or rejection of a resolution."""
    result = await service.verify_resolution(complaint_id, verification)
    return SuccessResponse.create(result.unwrap(), message=result.message or "OK")


@router.post(
    "/{complaint_id}/comments",
    response_model=SuccessResponse[Complaint],
    status_code=status.HTTP_201_CREATED,
)
async def add_complaint_comment(
    complaint_id: str,
    comment: ComplaintCommentCreate,
    service: ComplaintService = Depends(deps.get_complaint_service),
):
    """Add a comment (1 to 2000 characters) to the complaint's discussion."""
    result = await service.add_comment(complaint_id, comment)
    return SuccessResponse.create(result.unwrap(), message=result.message or "OK")
