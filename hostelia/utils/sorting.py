# hostelia/utils/sorting.py
"""
Case-insensitive sorting helpers for directory listings.
"""

from typing import Any, List, Sequence, TypeVar

T = TypeVar("T")


def _key(value: Any) -> str:
    return str(value or "").casefold()


def sort_by_property(items: Sequence[T], prop: str) -> List[T]:
    """Sort by a string attribute, ignoring case; missing values sort first."""
    return sorted(items, key=lambda item: _key(getattr(item, prop, None)))


def sort_by_name(items: Sequence[T]) -> List[T]:
    return sort_by_property(items, "name")


__all__ = ["sort_by_name", "sort_by_property"]
