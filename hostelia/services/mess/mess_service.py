"""
Mess menu and feedback reads.
"""

from datetime import date
from typing import List, Optional

from hostelia.core.constants import PATH_MESS_FEEDBACK, PATH_MESS_MENU
from hostelia.core.exceptions import AuthenticationError, BaseAppException
from hostelia.core.pagination import paginate_locally
from hostelia.schemas.common.pagination import PaginatedResponse, PaginationParams
from hostelia.schemas.dashboard.dashboard_metrics import MessFeedbackSummary
from hostelia.schemas.mess.mess_base import MessFeedback, MessMenu
from hostelia.services.analytics.dashboard_metrics import summarize_mess_feedback
from hostelia.services.base.base_service import BaseService
from hostelia.services.base.service_result import ServiceResult


class MessService(BaseService):

    async def fetch_feedback(self) -> List[MessFeedback]:
        items = await self.client.fetch_list(PATH_MESS_FEEDBACK, "feedbacks", "feedback")
        return self._parse_many(MessFeedback, items, "mess feedback")

    async def fetch_feedback_or_empty(self) -> List[MessFeedback]:
        """
        Feedback for views that can render without it.

        Any backend refusal yields an empty list except an expired session,
        which still has to reach the caller.
        """
        try:
            return await self.fetch_feedback()
        except AuthenticationError:
            raise
        except BaseAppException as exc:
            self._logger.warning(f"Mess feedback unavailable, continuing without it: {exc.message}")
            return []

    async def list_feedback(self, pagination: PaginationParams) -> ServiceResult[PaginatedResponse[MessFeedback]]:
        try:
            return ServiceResult.success(paginate_locally(await self.fetch_feedback(), pagination))
        except Exception as e:
            return self._handle_exception(e, "list mess feedback")

    async def get_menu(self) -> ServiceResult[MessMenu]:
        try:
            payload = await self.client.get(PATH_MESS_MENU)
            return ServiceResult.success(MessMenu.from_upstream(payload.get("menu", payload.get("data"))))
        except Exception as e:
            return self._handle_exception(e, "load mess menu")

    async def feedback_stats(self, today: Optional[date] = None) -> ServiceResult[MessFeedbackSummary]:
        try:
            return ServiceResult.success(summarize_mess_feedback(await self.fetch_feedback(), today))
        except Exception as e:
            return self._handle_exception(e, "summarize mess feedback")


__all__ = ["MessService"]
