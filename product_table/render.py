"""Plain-text rendering of table pages and product details."""

from .models import Product
from .normalizer import (
    PLACEHOLDER_DETAIL_URL,
    PLACEHOLDER_THUMBNAIL_URL,
    category_name,
    normalize_image_url,
)
from .pagination import Page
from .view import SortDirection, SortKey, SortState

NO_RESULTS = "No products found"

_COLUMNS = (("ID", 6), ("Title", 40), ("Price", 10), ("Category", 16), ("Image", 0))
_SORT_MARKERS = {SortDirection.ASC: "^", SortDirection.DESC: "v"}


def _truncate(text: str, width: int) -> str:
    if width and len(text) > width:
        return text[:width - 3] + "..."
    return text


def _format_row(cells: list[str]) -> str:
    parts = []
    for cell, (_, width) in zip(cells, _COLUMNS):
        parts.append(f"{_truncate(cell, width):{width}s}" if width else cell)
    return "  ".join(parts).rstrip()


def format_price(price: float) -> str:
    if price.is_integer():
        return f"${int(price)}"
    return f"${price}"


def format_header(sort_state: SortState | None = None) -> str:
    """Column header line, marking the sorted column."""
    names = []
    for name, _ in _COLUMNS:
        key = name.lower()
        if sort_state and sort_state.key is not None and sort_state.key.value == key:
            name = f"{name} {_SORT_MARKERS[sort_state.direction]}"
        elif key in {k.value for k in SortKey}:
            name = f"{name} -"
        names.append(name)
    return _format_row(names)


def format_product_row(product: Product, placeholder: str = PLACEHOLDER_THUMBNAIL_URL) -> str:
    return _format_row([
        str(product.id),
        product.title,
        format_price(product.price),
        category_name(product),
        normalize_image_url(product.images, placeholder=placeholder),
    ])


def format_pagination(page: Page) -> str:
    """Pagination bar: Previous, the window with the current page bracketed, Next."""
    parts = ["< Previous" if page.has_previous else "  Previous"]
    for number in page.nav_window:
        parts.append(f"[{number}]" if number == page.current_page else str(number))
    parts.append("Next >" if page.has_next else "Next")
    return " ".join(parts)


def format_table(
    page: Page,
    sort_state: SortState | None = None,
    placeholder: str = PLACEHOLDER_THUMBNAIL_URL,
) -> str:
    """Render a page as a text table followed by its pagination bar."""
    lines = [format_header(sort_state)]
    if page.is_empty:
        lines.append(NO_RESULTS)
    else:
        lines.extend(format_product_row(p, placeholder) for p in page.items)
    lines.append("")
    lines.append(format_pagination(page))
    return "\n".join(lines)


def format_detail(product: Product, placeholder: str = PLACEHOLDER_DETAIL_URL) -> str:
    """Render a product detail card."""
    return "\n".join([
        f"=== {product.title} ===",
        f"ID:          {product.id}",
        f"Price:       {format_price(product.price)}",
        f"Category:    {category_name(product)}",
        f"Image:       {normalize_image_url(product.images, placeholder=placeholder)}",
        "",
        product.description,
    ])
