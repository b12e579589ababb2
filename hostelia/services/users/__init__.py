"""
User directory services.
"""

from hostelia.services.users.user_directory_service import UserDirectoryService, filter_users

__all__ = ["UserDirectoryService", "filter_users"]
