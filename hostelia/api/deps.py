"""
Request dependencies.

Application state (settings, the shared HTTP pool and the process-wide token
store) lives on ``app.state`` and is handed to routes through these plain
callables.

Example usage in a router:
    from fastapi import Depends, APIRouter
    from hostelia.api import deps

    router = APIRouter()

    @router.get("/complaints")
    async def list_complaints(service = Depends(deps.get_complaint_service)):
        ...
"""

from typing import Dict, List, Optional

from fastapi import Depends, Query, Request
from pydantic import ValidationError as PydanticValidationError

from hostelia.config.settings import Settings
from hostelia.core.constants import STUDENTS_PAGE_SIZE
from hostelia.core.exceptions import ValidationError
from hostelia.core.pagination import normalize_pagination
from hostelia.integrations.backend_client import BackendClient
from hostelia.integrations.token_store import TokenStore
from hostelia.schemas.common.pagination import PaginationParams
from hostelia.schemas.complaint.complaint_filters import ComplaintFilterParams
from hostelia.schemas.fee.fee_filters import FeeFilterParams
from hostelia.schemas.user.user_base import UserFilterParams
from hostelia.services.analytics.dashboard_service import DashboardService
from hostelia.services.announcement.announcement_service import AnnouncementService
from hostelia.services.complaint.complaint_service import ComplaintService
from hostelia.services.fee.fee_service import FeeService
from hostelia.services.mess.mess_service import MessService
from hostelia.services.transit.transit_service import TransitService
from hostelia.services.users.user_directory_service import UserDirectoryService


# --- Application state ---------------------------------------------------------

def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_token_store(request: Request) -> TokenStore:
    """
    Token store for this request.

    A bearer token on the incoming request gets a store of its own so that
    concurrent callers never share credentials; otherwise the process-wide
    store (the logged-in operator) is used.
    """
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() == "bearer" and token.strip():
        return TokenStore(token=token.strip())
    return request.app.state.token_store


def get_backend_client(
    request: Request,
    token_store: TokenStore = Depends(get_token_store),
) -> BackendClient:
    return BackendClient(request.app.state.http_client, token_store)


# --- Services ------------------------------------------------------------------

def get_complaint_service(client: BackendClient = Depends(get_backend_client)) -> ComplaintService:
    return ComplaintService(client)


def get_fee_service(client: BackendClient = Depends(get_backend_client)) -> FeeService:
    return FeeService(client)


def get_user_directory_service(
    client: BackendClient = Depends(get_backend_client),
) -> UserDirectoryService:
    return UserDirectoryService(client)


def get_mess_service(client: BackendClient = Depends(get_backend_client)) -> MessService:
    return MessService(client)


def get_dashboard_service(client: BackendClient = Depends(get_backend_client)) -> DashboardService:
    return DashboardService(client)


def get_announcement_service(
    client: BackendClient = Depends(get_backend_client),
) -> AnnouncementService:
    return AnnouncementService(client)


def get_transit_service(client: BackendClient = Depends(get_backend_client)) -> TransitService:
    return TransitService(client)


# --- Pagination & Filtering ----------------------------------------------------

def get_pagination_params(
    page: Optional[int] = Query(None, description="Page number (1-indexed)"),
    page_size: Optional[int] = Query(None, description="Items per page"),
) -> PaginationParams:
    # Out-of-range values fall back to defaults instead of failing
    return normalize_pagination(page, page_size)


def get_directory_pagination_params(
    page: Optional[int] = Query(None, description="Page number (1-indexed)"),
    page_size: Optional[int] = Query(None, description="Items per page"),
) -> PaginationParams:
    return normalize_pagination(page, page_size, default_page_size=STUDENTS_PAGE_SIZE)


def get_complaint_filters(
    hostel: Optional[str] = Query(None),
    status: Optional[str] = Query(None),
    category: Optional[str] = Query(None),
    query: Optional[str] = Query(None, max_length=255),
) -> ComplaintFilterParams:
    return ComplaintFilterParams(hostel=hostel, status=status, category=category, query=query)


def get_fee_filters(
    hostel: Optional[str] = Query(None),
    fee_type: Optional[str] = Query(None, description="hostel, mess or all"),
    status: Optional[str] = Query(None, description="Document status or all"),
    query: Optional[str] = Query(None, max_length=255),
) -> FeeFilterParams:
    try:
        return FeeFilterParams(hostel=hostel, fee_type=fee_type, status=status, query=query)
    except PydanticValidationError as exc:
        field_errors: Dict[str, List[str]] = {}
        for error in exc.errors():
            field = str(error["loc"][0]) if error.get("loc") else "filters"
            field_errors.setdefault(field, []).append(error["msg"])
        raise ValidationError("Invalid fee filters", field_errors=field_errors) from exc


def get_user_filters(
    hostel: Optional[str] = Query(None),
    year: Optional[str] = Query(None),
    query: Optional[str] = Query(None, max_length=255),
) -> UserFilterParams:
    return UserFilterParams(hostel=hostel, year=year, query=query)
