# --- File: hostelia/schemas/common/pagination.py ---
"""
Pagination schemas for page-based list responses.
"""

from __future__ import annotations

from typing import Generic, List, TypeVar

from pydantic import Field, computed_field

from hostelia.core.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from hostelia.schemas.common.base import BaseSchema

T = TypeVar("T")

__all__ = [
    "PaginationParams",
    "PaginationMeta",
    "PaginatedResponse",
]


class PaginationParams(BaseSchema):
    """Pagination query parameters."""

    page: int = Field(
        default=1,
        ge=1,
        description="Page number (1-indexed)",
    )
    page_size: int = Field(
        default=DEFAULT_PAGE_SIZE,
        ge=1,
        le=MAX_PAGE_SIZE,
        description="Items per page",
    )

    @computed_field  # type: ignore[misc]
    @property
    def offset(self) -> int:
        """Index of the first item on this page."""
        return (self.page - 1) * self.page_size

    @computed_field  # type: ignore[misc]
    @property
    def limit(self) -> int:
        """Page size under the name the backend expects."""
        return self.page_size

    def to_query_params(self) -> dict:
        return {"page": self.page, "limit": self.page_size}


class PaginationMeta(BaseSchema):
    """
    Pagination metadata.

    ``total_pages`` is the exact ceiling of ``total_items / page_size`` and is
    therefore 0 for an empty collection.
    """

    total_items: int = Field(
        ...,
        ge=0,
        description="Total number of items",
    )
    total_pages: int = Field(
        ...,
        ge=0,
        description="Total number of pages",
    )
    current_page: int = Field(
        ...,
        ge=1,
        description="Current page number",
    )
    page_size: int = Field(
        ...,
        ge=1,
        description="Items per page",
    )
    has_next: bool = Field(..., description="Has next page")
    has_previous: bool = Field(..., description="Has previous page")

    @classmethod
    def build(cls, total_items: int, page: int, page_size: int) -> "PaginationMeta":
        total_pages = (total_items + page_size - 1) // page_size if page_size > 0 else 0
        # A page past the end reads as the last page
        page = min(max(page, 1), max(total_pages, 1))
        return cls(
            total_items=total_items,
            total_pages=total_pages,
            current_page=page,
            page_size=page_size,
            has_next=page < total_pages,
            has_previous=page > 1,
        )

    @computed_field  # type: ignore[misc]
    @property
    def range_start(self) -> int:
        """1-based index of the first item shown, 0 when nothing is shown."""
        if self.total_items == 0:
            return 0
        return min((self.current_page - 1) * self.page_size + 1, self.total_items)

    @computed_field  # type: ignore[misc]
    @property
    def range_end(self) -> int:
        return min(self.current_page * self.page_size, self.total_items)

    @computed_field  # type: ignore[misc]
    @property
    def page_label(self) -> str:
        return f"Page {self.current_page} of {self.total_pages}"

    @computed_field  # type: ignore[misc]
    @property
    def range_label(self) -> str:
        return f"Showing {self.range_start} to {self.range_end} of {self.total_items}"


class PaginatedResponse(BaseSchema, Generic[T]):
    """Generic paginated response."""

    items: List[T] = Field(..., description="List of items")
    meta: PaginationMeta = Field(..., description="Pagination metadata")

    @classmethod
    def create(
        cls,
        items: List[T],
        total_items: int,
        page: int,
        page_size: int,
    ) -> "PaginatedResponse[T]":
        """
        Create paginated response with calculated metadata.

        Args:
            items: List of items for current page.
            total_items: Total number of items across all pages.
            page: Current page number.
            page_size: Number of items per page.
        """
        meta = PaginationMeta.build(total_items, page, page_size)
        return cls(items=items, meta=meta)
