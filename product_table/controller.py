"""Controller owning the product collection and the table view state."""

import logging
from collections.abc import Iterable
from pathlib import Path

from .errors import ProductNotFoundError
from .export import DEFAULT_EXPORT_FILE, to_csv, write_csv
from .models import Product
from .pagination import Page, clamp_page, is_valid_page, paginate, total_pages
from .view import SortKey, SortState, compute_view

logger = logging.getLogger(__name__)


class ProductTableController:
    """Single owner of the collection, query, sort and pagination state.

    Every state change recomputes the view once through ``compute_view`` and
    clamps the current page to the new page count.
    """

    def __init__(
        self,
        products: Iterable[Product] = (),
        page_size: int = 10,
        page_size_options: Iterable[int] | None = None,
    ):
        self.page_size_options = tuple(page_size_options or ())
        self._check_page_size(page_size)
        self.collection: list[Product] = list(products)
        self.query = ""
        self.sort_state = SortState()
        self.page_size = page_size
        self.current_page = 1
        self.view: list[Product] = []
        self._refresh()

    def _check_page_size(self, page_size: int) -> None:
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got {page_size}")
        if self.page_size_options and page_size not in self.page_size_options:
            raise ValueError(
                f"page_size {page_size} is not one of {list(self.page_size_options)}"
            )

    def _refresh(self) -> None:
        self.view = compute_view(self.collection, self.query, self.sort_state)
        self.current_page = clamp_page(self.current_page, self.total_pages)

    @property
    def total_pages(self) -> int:
        return total_pages(len(self.view), self.page_size)

    # =========================================================================
    # Collection
    # =========================================================================

    def load(self, products: Iterable[Product]) -> None:
        """Replace the collection with a freshly fetched snapshot."""
        self.collection = list(products)
        self.current_page = 1
        self._refresh()
        logger.info(f"Loaded {len(self.collection)} products")

    def find(self, product_id: int) -> Product:
        """Get a product from the collection by id."""
        for product in self.collection:
            if product.id == product_id:
                return product
        raise ProductNotFoundError(product_id)

    def add(self, product: Product) -> None:
        """Append a newly created product and re-derive the view."""
        self.collection.append(product)
        self._refresh()
        logger.info(f"Product #{product.id} created")

    def replace(self, product_id: int, saved: Product) -> Product:
        """Merge a saved record over the existing product with the same id."""
        for index, product in enumerate(self.collection):
            if product.id == product_id:
                merged = product.merged(saved)
                self.collection[index] = merged
                self._refresh()
                logger.info(f"Product #{product_id} updated")
                return merged
        raise ProductNotFoundError(product_id)

    # =========================================================================
    # View state
    # =========================================================================

    def search(self, query: str) -> None:
        """Filter by title; always returns to the first page."""
        self.query = query
        self.current_page = 1
        self._refresh()

    def sort_by(self, key: SortKey | str) -> SortState:
        """Sort on a column, toggling direction if it is already active."""
        self.sort_state = self.sort_state.toggle(SortKey(key))
        self._refresh()
        return self.sort_state

    def set_page_size(self, page_size: int) -> None:
        """Change the page size and return to the first page."""
        self._check_page_size(page_size)
        self.page_size = page_size
        self.current_page = 1
        self._refresh()

    def go_to_page(self, page: int) -> bool:
        """Navigate to a page.

        Returns:
            False, leaving the state unchanged, if the page does not exist
        """
        if not is_valid_page(page, self.total_pages):
            logger.debug(f"Ignoring page {page} (total {self.total_pages})")
            return False
        self.current_page = page
        return True

    def next_page(self) -> bool:
        return self.go_to_page(self.current_page + 1)

    def previous_page(self) -> bool:
        return self.go_to_page(self.current_page - 1)

    def page(self) -> Page:
        """The current page of the view."""
        return paginate(self.view, self.page_size, self.current_page)

    # =========================================================================
    # Export
    # =========================================================================

    def export_csv(self) -> str:
        """CSV text of the whole view, not just the current page."""
        return to_csv(self.view)

    def export_to_file(self, path: Path | str = DEFAULT_EXPORT_FILE) -> Path:
        """Write the whole view to a CSV file."""
        return write_csv(self.view, path)
