"""
Student and warden directory endpoints.
"""

from fastapi import APIRouter, Depends

from hostelia.api import deps
from hostelia.schemas.common.pagination import PaginatedResponse, PaginationParams
from hostelia.schemas.common.response import SuccessResponse
from hostelia.schemas.user.user_base import User, UserFilterParams
from hostelia.services.users.user_directory_service import UserDirectoryService

router = APIRouter(tags=["Directory"])


@router.get("/students", response_model=SuccessResponse[PaginatedResponse[User]])
async def list_students(
    filters: UserFilterParams = Depends(deps.get_user_filters),
    pagination: PaginationParams = Depends(deps.get_directory_pagination_params),
    service: UserDirectoryService = Depends(deps.get_user_directory_service),
):
    """Students sorted by name, ten per page unless asked otherwise."""
    result = await service.list_students(filters, pagination)
    return SuccessResponse.create(result.unwrap())


@router.get("/wardens", response_model=SuccessResponse[PaginatedResponse[User]])
async def list_wardens(
    filters: UserFilterParams = Depends(deps.get_user_filters),
    pagination: PaginationParams = Depends(deps.get_directory_pagination_params),
    service: UserDirectoryService = Depends(deps.get_user_directory_service),
):
    result = await service.list_wardens(filters, pagination)
    return SuccessResponse.create(result.unwrap())


@router.get("/users/{user_id}", response_model=SuccessResponse[User])
async def get_user(
    user_id: str,
    service: UserDirectoryService = Depends(deps.get_user_directory_service),
):
    result = await service.get_user(user_id)
    return SuccessResponse.create(result.unwrap())
