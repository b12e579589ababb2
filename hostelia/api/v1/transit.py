"""
Gate entry/exit log and statistics.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from hostelia.api import deps
from hostelia.schemas.common.enums import TransitStatus
from hostelia.schemas.common.pagination import PaginatedResponse, PaginationParams
from hostelia.schemas.common.response import SuccessResponse
from hostelia.schemas.dashboard.dashboard_metrics import TransitStats
from hostelia.schemas.transit.transit_base import TransitEntry
from hostelia.services.transit.transit_service import TransitService

router = APIRouter(prefix="/transit", tags=["Transit"])


@router.get("", response_model=SuccessResponse[PaginatedResponse[TransitEntry]])
async def list_transit_entries(
    transit_status: Optional[TransitStatus] = Query(None, description="ENTRY or EXIT"),
    student_id: Optional[str] = Query(None, description="Only this student's history"),
    pagination: PaginationParams = Depends(deps.get_pagination_params),
    service: TransitService = Depends(deps.get_transit_service),
):
    result = await service.list_entries(pagination, transit_status, student_id)
    return SuccessResponse.create(result.unwrap())


@router.get("/stats", response_model=SuccessResponse[TransitStats])
async def transit_stats(service: TransitService = Depends(deps.get_transit_service)):
    """Entries, exits and students currently outside, based on each student's latest record."""
    result = await service.stats()
    return SuccessResponse.create(result.unwrap())
