# hostelia/core/pagination.py
from __future__ import annotations

"""
Core pagination helpers.

This module provides:
- `normalize_pagination` to clean up page/page_size inputs using defaults
  and clamping.
- `paginate_items` to map and wrap results in a `PaginatedResponse` schema.
- `paginate_locally` to slice a fully fetched collection into one page.
"""

from typing import Callable, List, Optional, Sequence, TypeVar

from hostelia.core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from hostelia.schemas.common.pagination import PaginatedResponse, PaginationParams

TModel = TypeVar("TModel")
TSchema = TypeVar("TSchema")


def normalize_pagination(
    page: int | None,
    page_size: int | None,
    default_page_size: int = DEFAULT_PAGE_SIZE,
) -> PaginationParams:
    """
    Normalize raw page & page_size inputs into a PaginationParams object.

    Rules:
        - page < 1 or None -> DEFAULT_PAGE
        - page_size < 1 or None -> default_page_size
        - page_size > MAX_PAGE_SIZE -> MAX_PAGE_SIZE
    """
    if page is None or page < 1:
        page = DEFAULT_PAGE

    if page_size is None or page_size < 1:
        page_size = default_page_size

    if page_size > MAX_PAGE_SIZE:
        page_size = MAX_PAGE_SIZE

    return PaginationParams(page=page, page_size=page_size)


def paginate_items(
    *,
    items: Sequence[TModel],
    total_items: int,
    params: PaginationParams,
    mapper: Optional[Callable[[TModel], TSchema]] = None,
) -> PaginatedResponse[TSchema]:
    """
    Wrap one page of items in a PaginatedResponse.

    Args:
        items: The items already restricted to the requested page.
        total_items: Total number of items across all pages.
        params: Pagination parameters (page, page_size).
        mapper: Optional conversion applied to each item.
    """
    mapped: List = [mapper(obj) for obj in items] if mapper else list(items)
    return PaginatedResponse.create(
        items=mapped,
        total_items=total_items,
        page=params.page,
        page_size=params.page_size,
    )


def paginate_locally(
    items: Sequence[TModel],
    params: PaginationParams,
    mapper: Optional[Callable[[TModel], TSchema]] = None,
) -> PaginatedResponse[TSchema]:
    """
    Slice a complete collection down to the requested page.

    Requests past the last page get the last page.
    """
    last_page = max((len(items) + params.page_size - 1) // params.page_size, 1)
    if params.page > last_page:
        params = PaginationParams(page=last_page, page_size=params.page_size)
    window = items[params.offset:params.offset + params.page_size]
    return paginate_items(items=window, total_items=len(items), params=params, mapper=mapper)


__all__ = ["normalize_pagination", "paginate_items", "paginate_locally"]
