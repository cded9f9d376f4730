"""Pagination of the active view."""

import math
from collections.abc import Sequence

from pydantic import BaseModel, Field

from .models import Product

NAV_WINDOW_SIZE = 5


class Page(BaseModel):
    """One page of the view plus navigation metadata."""

    items: list[Product] = Field(default_factory=list)
    current_page: int = Field(default=1, description="Requested page number")
    total_pages: int = Field(default=0)
    page_size: int = Field(default=10)
    nav_window: list[int] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """True when the page has nothing to show."""
        return not self.items

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.total_pages > 0 and self.current_page < self.total_pages


def total_pages(view_size: int, page_size: int) -> int:
    """Number of pages needed for ``view_size`` items; 0 for an empty view."""
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    if view_size <= 0:
        return 0
    return math.ceil(view_size / page_size)


def is_valid_page(page: int, pages: int) -> bool:
    """Whether ``page`` can be navigated to."""
    return 1 <= page <= pages


def clamp_page(page: int, pages: int) -> int:
    """Clamp a page number into ``[1, pages]``; 1 when there are no pages."""
    if pages <= 0:
        return 1
    return max(1, min(page, pages))


def navigation_window(current_page: int, pages: int) -> list[int]:
    """Page numbers offered for direct navigation.

    At most five consecutive pages starting two before the current one,
    shifted back from the last page so the window stays full near the end.

    Args:
        current_page: Page being displayed
        pages: Total number of pages

    Returns:
        Ascending page numbers, empty if there are no pages
    """
    start = max(1, current_page - 2)
    end = min(pages, start + NAV_WINDOW_SIZE - 1)
    if end - start < NAV_WINDOW_SIZE - 1:
        start = max(1, end - (NAV_WINDOW_SIZE - 1))
    return list(range(start, end + 1))


def paginate(view: Sequence[Product], page_size: int, current_page: int) -> Page:
    """Slice one page out of the view.

    Args:
        view: Active (filtered, sorted) products
        page_size: Products per page
        current_page: 1-based page number

    Returns:
        Page with its slice, the navigation window and the page count
    """
    pages = total_pages(len(view), page_size)
    start = (current_page - 1) * page_size
    items = list(view[start:start + page_size]) if start >= 0 else []
    return Page(
        items=items,
        current_page=current_page,
        total_pages=pages,
        page_size=page_size,
        nav_window=navigation_window(current_page, pages),
    )
