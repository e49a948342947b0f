"""Pagination schemas for page/limit pagination."""

import math
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """Generic page of results with totals for page navigation.

    ``limit`` is None when the whole filtered set was returned.
    """

    items: list[T]
    total: int = Field(description="Number of items matching the filters across all pages.")
    page: int = Field(default=1, description="1-based page number.")
    limit: int | None = Field(default=None, description="Page size, or None when unbounded.")
    total_pages: int = Field(default=1, description="Number of pages for this limit.")


def page_offset(page: int | None, limit: int) -> int:
    """Return the row offset of a 1-based page (page defaults to 1)."""
    return ((page or 1) - 1) * limit


def count_pages(total: int, limit: int | None) -> int:
    """Number of pages needed for ``total`` items; an unbounded listing is one page."""
    if not limit:
        return 1
    return max(1, math.ceil(total / limit))
