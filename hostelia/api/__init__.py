"""
HTTP layer: request dependencies and the versioned routers.

The v1 router is mounted by the application factory:

    from hostelia.api.v1.router import router
    app.include_router(router, prefix=settings.API_V1_STR)
"""
