"""
Announcement schemas.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from hostelia.schemas.common.base import TimestampMixin, UpstreamSchema

__all__ = ["AnnouncementAuthor", "Announcement"]


class AnnouncementAuthor(UpstreamSchema):
    name: str
    email: str
    role: str


class Announcement(UpstreamSchema, TimestampMixin):
    """A notice posted by staff, optionally with an attached file."""

    id: str = Field(..., alias="_id")
    title: str
    message: str
    posted_by: Optional[AnnouncementAuthor] = Field(default=None, alias="postedBy")
    file_url: Optional[str] = Field(default=None, alias="fileUrl")
