"""
Announcement schemas package.
"""

from hostelia.schemas.announcement.announcement_base import Announcement, AnnouncementAuthor

__all__ = ["Announcement", "AnnouncementAuthor"]
