"""
Fee submission endpoints.
"""

from fastapi import APIRouter, Depends, Query

from hostelia.api import deps
from hostelia.schemas.common.enums import FeeType
from hostelia.schemas.common.pagination import PaginatedResponse, PaginationParams
from hostelia.schemas.common.response import SuccessResponse
from hostelia.schemas.fee.fee_base import FeeStatusUpdate, FeeSubmission
from hostelia.schemas.fee.fee_filters import FeeFilterParams
from hostelia.schemas.timeline.timeline_base import FeeTimeline
from hostelia.services.fee.fee_service import FeeService

router = APIRouter(prefix="/fees", tags=["Fees"])


@router.get("", response_model=SuccessResponse[PaginatedResponse[FeeSubmission]])
async def list_fees(
    filters: FeeFilterParams = Depends(deps.get_fee_filters),
    pagination: PaginationParams = Depends(deps.get_pagination_params),
    service: FeeService = Depends(deps.get_fee_service),
):
    result = await service.list_fees(filters, pagination)
    return SuccessResponse.create(result.unwrap())


@router.get("/{student_id}/timeline", response_model=SuccessResponse[FeeTimeline])
async def get_fee_timeline(
    student_id: str,
    fee_type: FeeType = Query(..., description="hostel or mess"),
    service: FeeService = Depends(deps.get_fee_service),
):
    """Progress stages for one of the student's fee documents."""
    result = await service.get_timeline(student_id, fee_type)
    return SuccessResponse.create(result.unwrap())


@router.patch("/{student_id}/status", response_model=SuccessResponse[FeeSubmission])
async def update_fee_status(
    student_id: str,
    update: FeeStatusUpdate,
    service: FeeService = Depends(deps.get_fee_service),
):
    """Approve or reject a pending document. Rejection requires a reason."""
    result = await service.update_status(student_id, update)
    return SuccessResponse.create(result.unwrap(), message=result.message or "OK")
