"""
User schemas package.
"""

from hostelia.schemas.user.user_base import User, UserFilterParams

__all__ = ["User", "UserFilterParams"]
