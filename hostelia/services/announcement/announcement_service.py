"""
Staff announcements, newest first as the backend returns them.
"""

from typing import List

from hostelia.core.constants import PATH_ANNOUNCEMENTS
from hostelia.core.pagination import paginate_locally
from hostelia.schemas.announcement.announcement_base import Announcement
from hostelia.schemas.common.pagination import PaginatedResponse, PaginationParams
from hostelia.services.base.base_service import BaseService
from hostelia.services.base.service_result import ServiceResult


class AnnouncementService(BaseService):

    async def fetch_all(self) -> List[Announcement]:
        items = await self.client.fetch_list(PATH_ANNOUNCEMENTS, "announcements")
        return self._parse_many(Announcement, items, "announcement")

    async def list_announcements(
        self,
        pagination: PaginationParams,
    ) -> ServiceResult[PaginatedResponse[Announcement]]:
        try:
            return ServiceResult.success(paginate_locally(await self.fetch_all(), pagination))
        except Exception as e:
            return self._handle_exception(e, "list announcements")


__all__ = ["AnnouncementService"]
