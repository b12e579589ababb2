"""
Announcement services.
"""

from hostelia.services.announcement.announcement_service import AnnouncementService

__all__ = ["AnnouncementService"]
