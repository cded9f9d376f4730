"""Filter and sort stages that derive the active view from the collection."""

import logging
from collections.abc import Callable, Iterable
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .models import Product

logger = logging.getLogger(__name__)


class SortDirection(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


class SortKey(str, Enum):
    """Sortable product columns."""

    ID = "id"
    TITLE = "title"
    PRICE = "price"

    @property
    def accessor(self) -> Callable[[Product], Any]:
        """Field accessor used to compare products on this key."""
        return _ACCESSORS[self]


_ACCESSORS: dict[SortKey, Callable[[Product], Any]] = {
    SortKey.ID: lambda product: product.id,
    SortKey.TITLE: lambda product: product.title,
    SortKey.PRICE: lambda product: product.price,
}


class SortState(BaseModel):
    """Current sort column and direction."""

    model_config = ConfigDict(frozen=True)

    key: SortKey | None = Field(default=None)
    direction: SortDirection = Field(default=SortDirection.ASC)

    def toggle(self, key: SortKey) -> "SortState":
        """Return the state after a sort request on ``key``.

        Requesting the active key flips the direction; any other key starts
        ascending.
        """
        if self.key == key:
            return SortState(key=key, direction=self.direction.flipped())
        return SortState(key=key, direction=SortDirection.ASC)


def _comparable(value: Any) -> Any:
    if isinstance(value, str):
        return value.lower()
    return value


def filter_products(collection: Iterable[Product], query: str) -> list[Product]:
    """Select products whose title contains the query, ignoring case.

    Args:
        collection: All products, in collection order
        query: Free-text search string

    Returns:
        Matching products in collection order
    """
    needle = query.lower()
    return [product for product in collection if needle in product.title.lower()]


def sort_products(
    view: list[Product],
    key: SortKey,
    direction: SortDirection = SortDirection.ASC,
) -> list[Product]:
    """Stable in-place sort of a view by a product column.

    Text values compare case-insensitively, numbers by value. Products with
    equal keys keep their input order in both directions.

    Args:
        view: Products to reorder
        key: Column to sort on
        direction: Ascending or descending

    Returns:
        The same list, reordered
    """
    accessor = SortKey(key).accessor
    view.sort(
        key=lambda product: _comparable(accessor(product)),
        reverse=SortDirection(direction) is SortDirection.DESC,
    )
    return view


def compute_view(
    collection: Iterable[Product],
    query: str = "",
    sort_state: SortState | None = None,
) -> list[Product]:
    """Derive the active view: filter by query, then re-apply the sort if set."""
    view = filter_products(collection, query)
    if sort_state is not None and sort_state.key is not None:
        view = sort_products(view, sort_state.key, sort_state.direction)
    logger.debug(
        f"View computed: {len(view)} products (query={query!r}, sort={sort_state})"
    )
    return view
