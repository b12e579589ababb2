"""
Mess menu, feedback and feedback statistics.
"""

from fastapi import APIRouter, Depends

from hostelia.api import deps
from hostelia.schemas.common.pagination import PaginatedResponse, PaginationParams
from hostelia.schemas.common.response import SuccessResponse
from hostelia.schemas.dashboard.dashboard_metrics import MessFeedbackSummary
from hostelia.schemas.mess.mess_base import MessFeedback, MessMenu
from hostelia.services.mess.mess_service import MessService

router = APIRouter(prefix="/mess", tags=["Mess"])


@router.get("/feedback", response_model=SuccessResponse[PaginatedResponse[MessFeedback]])
async def list_mess_feedback(
    pagination: PaginationParams = Depends(deps.get_pagination_params),
    service: MessService = Depends(deps.get_mess_service),
):
    result = await service.list_feedback(pagination)
    return SuccessResponse.create(result.unwrap())


@router.get("/feedback/stats", response_model=SuccessResponse[MessFeedbackSummary])
async def mess_feedback_stats(service: MessService = Depends(deps.get_mess_service)):
    result = await service.feedback_stats()
    return SuccessResponse.create(result.unwrap())


@router.get("/menu", response_model=SuccessResponse[MessMenu])
async def mess_menu(service: MessService = Depends(deps.get_mess_service)):
    result = await service.get_menu()
    return SuccessResponse.create(result.unwrap())
