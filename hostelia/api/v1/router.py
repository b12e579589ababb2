"""
API v1 Router - Main Entry Point
Aggregates all v1 endpoints of the dashboard service
"""
from fastapi import APIRouter, Depends

from hostelia import __version__
from hostelia.api import deps
from hostelia.api.v1 import announcements, complaints, dashboard, fees, mess, transit, users
from hostelia.config.settings import Settings
from hostelia.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(
    responses={
        401: {"description": "Unauthorized"},
        403: {"description": "Forbidden"},
        404: {"description": "Not Found"},
        409: {"description": "Invalid Status Transition"},
        422: {"description": "Validation Error"},
        500: {"description": "Internal Server Error"},
        502: {"description": "Backend Unavailable"},
    }
)

router.include_router(complaints.router)
router.include_router(fees.router)
router.include_router(users.router)
router.include_router(dashboard.router)
router.include_router(mess.router)
router.include_router(transit.router)
router.include_router(announcements.router)


@router.get("/health", tags=["System Health"])
async def api_health_check(settings: Settings = Depends(deps.get_app_settings)):
    """
    Liveness check. The backend is not contacted.
    """
    return {
        "status": "healthy",
        "app": settings.APP_NAME,
        "version": __version__,
        "api_version": settings.API_VERSION,
        "environment": settings.ENVIRONMENT,
    }


logger.info(f"API v1 router initialized with {len(router.routes)} routes")
