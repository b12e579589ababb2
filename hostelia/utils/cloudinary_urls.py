# hostelia/utils/cloudinary_urls.py
from __future__ import annotations

"""
Helpers for document URLs served by the Cloudinary file host.

URLs are only inspected and reformatted here; nothing is uploaded or fetched.
"""

import re
from typing import List
from urllib.parse import urlsplit, urlunsplit

CLOUDINARY_HOST = "res.cloudinary.com"
ATTACHMENT_FLAG = "fl_attachment"

_PDF_SUFFIX = re.compile(r"\.pdf$", re.IGNORECASE)
_IMAGE_SUFFIX = re.compile(r"\.(jpg|jpeg|png|gif|webp|svg)$", re.IGNORECASE)


def is_cloudinary_url(url: str | None) -> bool:
    return bool(url) and CLOUDINARY_HOST in url


def is_pdf_url(url: str | None) -> bool:
    """
    True for URLs that point at a PDF.

    Cloudinary stores PDFs as raw resources, so ``/raw/upload/`` counts too.
    """
    if not url:
        return False
    if _PDF_SUFFIX.search(url):
        return True
    if "pdf" in url.lower():
        return True
    return is_cloudinary_url(url) and "/raw/upload/" in url


def is_image_url(url: str | None) -> bool:
    if not url:
        return False
    if _IMAGE_SUFFIX.search(url):
        return True
    if "image" in url and "application/pdf" not in url:
        return True
    return is_cloudinary_url(url) and "/image/upload/" in url


def get_download_url(url: str | None) -> str | None:
    """Append the attachment flag so the host forces a download."""
    if not is_cloudinary_url(url):
        return url
    if _has_attachment_flag(url):
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{ATTACHMENT_FLAG}"


def get_view_url(url: str | None) -> str | None:
    """Strip the attachment flag so the document renders inline."""
    if not is_cloudinary_url(url):
        return url
    parts = urlsplit(url)
    # Other parameters are kept exactly as written
    kept = [s for s in _query_segments(parts.query) if _segment_key(s) != ATTACHMENT_FLAG]
    return urlunsplit(parts._replace(query="&".join(kept)))


def _query_segments(query: str) -> List[str]:
    return [segment for segment in query.split("&") if segment]


def _segment_key(segment: str) -> str:
    return segment.split("=", 1)[0]


def _has_attachment_flag(url: str) -> bool:
    segments = _query_segments(urlsplit(url).query)
    return any(_segment_key(s) == ATTACHMENT_FLAG for s in segments)


__all__ = [
    "is_cloudinary_url",
    "is_pdf_url",
    "is_image_url",
    "get_download_url",
    "get_view_url",
]
