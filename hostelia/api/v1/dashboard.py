"""
Role dashboards.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from hostelia.api import deps
from hostelia.schemas.common.response import SuccessResponse
from hostelia.schemas.dashboard.dashboard_metrics import StaffDashboard, StudentDashboard
from hostelia.services.analytics.dashboard_service import DashboardService

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/student", response_model=SuccessResponse[StudentDashboard])
async def student_dashboard(
    student_id: Optional[str] = Query(None, description="Defaults to the caller's own record"),
    service: DashboardService = Depends(deps.get_dashboard_service),
):
    """Complaint counts, own fee documents, recent complaints and announcements."""
    result = await service.student_dashboard(student_id)
    return SuccessResponse.create(result.unwrap())


@router.get("/staff", response_model=SuccessResponse[StaffDashboard])
async def staff_dashboard(service: DashboardService = Depends(deps.get_dashboard_service)):
    """
    Warden and admin overview.

    Mess feedback is optional here; when the backend cannot serve it the
    summary is reported as empty rather than failing the whole dashboard.
    """
    result = await service.staff_dashboard()
    return SuccessResponse.create(result.unwrap())
