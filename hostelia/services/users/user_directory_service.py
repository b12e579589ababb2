"""
Student and warden directory listings.
"""

from typing import Dict, List, Optional

from hostelia.core.constants import PATH_STUDENTS, PATH_USER, PATH_WARDENS
from hostelia.core.exceptions import ResourceNotFoundError
from hostelia.core.pagination import paginate_locally
from hostelia.integrations.backend_client import extract_object
from hostelia.schemas.common.pagination import PaginatedResponse, PaginationParams
from hostelia.schemas.user.user_base import User, UserFilterParams
from hostelia.services.base.base_service import BaseService
from hostelia.services.base.service_result import ServiceResult
from hostelia.utils.sorting import sort_by_name


def filter_users(users: List[User], filters: Optional[UserFilterParams]) -> List[User]:
    """
    Apply hostel, year and free-text filters.

    The backend scopes wardens to their hostel but does not filter further,
    so the remaining criteria are applied here.
    """
    if filters is None:
        return list(users)

    result = users
    if filters.hostel:
        result = [u for u in result if u.hostel is not None and u.hostel.value == filters.hostel]
    if filters.year:
        result = [u for u in result if u.year is not None and u.year.value == filters.year]
    if filters.query:
        needle = filters.query.casefold()
        result = [
            u for u in result
            if any(needle in (value or "").casefold() for value in (u.name, u.email, u.roll_no, u.room_no))
        ]
    return list(result)


class UserDirectoryService(BaseService):
    """Directory reads against ``/user``."""

    async def fetch_students(self, filters: Optional[UserFilterParams] = None) -> List[User]:
        params = filters.to_query_params() if filters else None
        items = await self.client.fetch_list(PATH_STUDENTS, "students", params=params)
        return filter_users(self._parse_many(User, items, "student"), filters)

    async def fetch_wardens(self, filters: Optional[UserFilterParams] = None) -> List[User]:
        params = filters.to_query_params() if filters else None
        items = await self.client.fetch_list(PATH_WARDENS, "wardens", params=params)
        return filter_users(self._parse_many(User, items, "warden"), filters)

    async def email_to_hostel(self) -> Dict[str, str]:
        """Map student email to hostel, used to place fee submissions."""
        return {
            student.email: student.hostel.value
            for student in await self.fetch_students()
            if student.hostel is not None
        }

    async def list_students(
        self,
        filters: UserFilterParams,
        pagination: PaginationParams,
    ) -> ServiceResult[PaginatedResponse[User]]:
        try:
            students = sort_by_name(await self.fetch_students(filters))
            return ServiceResult.success(paginate_locally(students, pagination))
        except Exception as e:
            return self._handle_exception(e, "list students")

    async def list_wardens(
        self,
        filters: UserFilterParams,
        pagination: PaginationParams,
    ) -> ServiceResult[PaginatedResponse[User]]:
        try:
            wardens = sort_by_name(await self.fetch_wardens(filters))
            return ServiceResult.success(paginate_locally(wardens, pagination))
        except Exception as e:
            return self._handle_exception(e, "list wardens")

    async def get_user(self, user_id: str) -> ServiceResult[User]:
        try:
            payload = await self.client.get(f"{PATH_USER}/{user_id}")
            record = extract_object(payload, "user")
            if record is None:
                raise ResourceNotFoundError("User", user_id)
            return ServiceResult.success(self._parse(User, record, "user"))
        except Exception as e:
            return self._handle_exception(e, "get user", user_id)


__all__ = ["UserDirectoryService", "filter_users"]
