from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hostelia import __version__
from hostelia.api.v1.router import router as api_v1_router
from hostelia.config.logging import setup_logging
from hostelia.config.settings import Settings, get_settings
from hostelia.core.logging import get_logger
from hostelia.core.middleware import register_exception_handlers, register_middlewares
from hostelia.integrations.backend_client import create_http_client
from hostelia.integrations.token_store import TokenStore

logger = get_logger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """
    Application factory for the FastAPI app.

    - Configures title, version, debug mode from Settings.
    - Registers CORS, core middleware, and exception handlers.
    - Includes the versioned API router under /api/v1.
    - Opens the backend connection pool for the lifetime of the app.

    ``transport`` replaces the network transport of the backend pool.
    """
    settings = settings or get_settings()
    setup_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.http_client = create_http_client(settings, transport=transport)
        logger.info(f"Backend client ready for {settings.BACKEND_API_URL}")
        try:
            yield
        finally:
            await app.state.http_client.aclose()
            logger.info("Backend client closed")

    app = FastAPI(
        title=settings.APP_NAME,
        debug=settings.DEBUG,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.token_store = TokenStore(path=settings.TOKEN_STORE_PATH)

    origins = settings.get_cors_origins()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Browsers refuse credentials with a wildcard origin
        allow_credentials=origins != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register shared core middlewares (request ID, timing, etc.)
    register_middlewares(app)
    register_exception_handlers(app)

    app.include_router(api_v1_router, prefix=settings.API_V1_STR)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run(
        "hostelia.main:app",
        host=_settings.HOST,
        port=_settings.PORT,
        reload=_settings.is_development(),
    )
