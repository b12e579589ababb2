# hostelia/utils/file_validation.py
from __future__ import annotations

"""
Validation of fee-document uploads before they are handed to the file host.
"""

import os
from typing import Iterable, Optional

from hostelia.config.settings import Settings, get_settings
from hostelia.core.exceptions import ValidationError

ALLOWED_MIME_TYPES = {
    "image/png",
    "image/jpeg",
    "image/jpg",
    "application/pdf",
}


def validate_file_extension(filename: str, allowed: Iterable[str]) -> bool:
    ext = os.path.splitext(filename)[1].lower().lstrip(".")
    return ext in {a.lower().lstrip(".") for a in allowed}


def validate_file_size(size: int, max_size: int) -> bool:
    return 0 < size <= max_size


def validate_upload(
    filename: str,
    content_type: str,
    size: int,
    settings: Optional[Settings] = None,
) -> None:
    """
    Accept PNG, JPEG or PDF documents within the configured size limit.

    Raises:
        ValidationError: listing every failed check by field
    """
    settings = settings or get_settings()
    errors = {}

    if not filename:
        errors["file"] = ["Please select a file"]
    else:
        if content_type not in ALLOWED_MIME_TYPES:
            errors.setdefault("file", []).append("Please select a PNG, JPG, or PDF file")
        allowed = sorted(settings.get_allowed_extensions())
        if not validate_file_extension(filename, allowed):
            errors.setdefault("filename", []).append(f"Extension must be one of: {', '.join(allowed)}")
        if not validate_file_size(size, settings.MAX_UPLOAD_SIZE):
            limit_mb = settings.MAX_UPLOAD_SIZE // (1024 * 1024)
            errors.setdefault("size", []).append(f"File size must be less than {limit_mb}MB")

    if errors:
        raise ValidationError("Invalid document upload", field_errors=errors)


__all__ = ["ALLOWED_MIME_TYPES", "validate_file_extension", "validate_file_size", "validate_upload"]
