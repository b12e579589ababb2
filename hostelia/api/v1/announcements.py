"""
Announcement feed.
"""

from fastapi import APIRouter, Depends

from hostelia.api import deps
from hostelia.schemas.announcement.announcement_base import Announcement
from hostelia.schemas.common.pagination import PaginatedResponse, PaginationParams
from hostelia.schemas.common.response import SuccessResponse
from hostelia.services.announcement.announcement_service import AnnouncementService

router = APIRouter(prefix="/announcements", tags=["Announcements"])


@router.get("", response_model=SuccessResponse[PaginatedResponse[Announcement]])
async def list_announcements(
    pagination: PaginationParams = Depends(deps.get_pagination_params),
    service: AnnouncementService = Depends(deps.get_announcement_service),
):
    result = await service.list_announcements(pagination)
    return SuccessResponse.create(result.unwrap())
