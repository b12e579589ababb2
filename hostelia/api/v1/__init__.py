"""
API v1 package.

The router composition lives in `hostelia.api.v1.router`.
"""

from hostelia.api.v1.router import router

__all__ = ["router"]
