# --- File: hostelia/schemas/common/filters.py ---
"""
Shared helpers for list filter schemas.
"""

from typing import Any, Dict, Mapping, Union

from hostelia.core.constants import FILTER_ALL

__all__ = [
    "clean_filter_value",
    "merge_query_params",
]


def clean_filter_value(value: Union[str, None]) -> Union[str, None]:
    """Treat blanks and the ``all`` dropdown sentinel as no filter."""
    if value is None:
        return None
    value = value.strip()
    if not value or value.lower() == FILTER_ALL:
        return None
    return value


def merge_query_params(*sources: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Merge query parameter mappings left to right.

    Values that are None, blank or the ``all`` sentinel are dropped so they
    never reach the backend.
    """
    merged: Dict[str, Any] = {}
    for source in sources:
        for key, value in source.items():
            if isinstance(value, str):
                value = clean_filter_value(value)
            elif hasattr(value, "value"):
                value = value.value
            if value is None:
                merged.pop(key, None)
                continue
            merged[key] = value
    return merged
