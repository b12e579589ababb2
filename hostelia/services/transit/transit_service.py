"""
Gate transit log: the entry/exit history and its statistics.
"""

from datetime import date
from typing import List, Optional

from hostelia.core.constants import PATH_TRANSIT
from hostelia.core.pagination import paginate_locally
from hostelia.schemas.common.enums import TransitStatus
from hostelia.schemas.common.pagination import PaginatedResponse, PaginationParams
from hostelia.schemas.dashboard.dashboard_metrics import TransitStats
from hostelia.schemas.transit.transit_base import TransitEntry
from hostelia.services.analytics.dashboard_metrics import compute_transit_stats
from hostelia.services.base.base_service import BaseService
from hostelia.services.base.service_result import ServiceResult


class TransitService(BaseService):

    async def fetch_all(self) -> List[TransitEntry]:
        items = await self.client.fetch_list(PATH_TRANSIT, "transitEntries")
        return self._parse_many(TransitEntry, items, "transit entry")

    async def list_entries(
        self,
        pagination: PaginationParams,
        transit_status: Optional[TransitStatus] = None,
        student_id: Optional[str] = None,
    ) -> ServiceResult[PaginatedResponse[TransitEntry]]:
        """
        One page of the gate log.

        The backend returns the whole log, so both filters are applied here.
        """
        try:
            entries = await self.fetch_all()
            if transit_status is not None:
                entries = [e for e in entries if e.transit_status == transit_status]
            if student_id:
                entries = [e for e in entries if e.student is not None and e.student.id == student_id]
            return ServiceResult.success(paginate_locally(entries, pagination))
        except Exception as e:
            return self._handle_exception(e, "list transit entries")

    async def stats(self, today: Optional[date] = None) -> ServiceResult[TransitStats]:
        try:
            return ServiceResult.success(compute_transit_stats(await self.fetch_all(), today))
        except Exception as e:
            return self._handle_exception(e, "compute transit statistics")


__all__ = ["TransitService"]
