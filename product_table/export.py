"""CSV export of the active view."""

import logging
from collections.abc import Sequence
from pathlib import Path

from .errors import EmptyExportError
from .models import Product

logger = logging.getLogger(__name__)

CSV_FIELDS = ("id", "title", "price", "description", "category_name", "image_url")
DEFAULT_EXPORT_FILE = "products_export.csv"


def _quote(value: str) -> str:
    """Wrap a text value in double quotes, doubling embedded quotes."""
    return '"' + value.replace('"', '""') + '"'


def _format_number(value: int | float) -> str:
    """Canonical decimal form: integral values without a fraction part."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value)


def _csv_row(product: Product) -> str:
    category = _quote(product.category.name) if product.category else '""'
    # Raw first entry, even when array-encoded
    image = product.images[0] if product.images else ""
    return ",".join([
        _format_number(product.id),
        _quote(product.title),
        _format_number(product.price),
        _quote(product.description),
        category,
        image,
    ])


def to_csv(view: Sequence[Product]) -> str:
    """Render products as CSV text.

    Text columns are always quoted; id, price and image URL never are.

    Args:
        view: Products to export, in display order

    Returns:
        Header plus one line per product, newline-joined

    Raises:
        EmptyExportError: If there is nothing to export
    """
    if not view:
        raise EmptyExportError()

    rows = [",".join(CSV_FIELDS)]
    rows.extend(_csv_row(product) for product in view)
    return "\n".join(rows)


def write_csv(view: Sequence[Product], path: Path | str = DEFAULT_EXPORT_FILE) -> Path:
    """Export products to a CSV file.

    Args:
        view: Products to export
        path: Destination file

    Returns:
        Path of the written file
    """
    path = Path(path)
    content = to_csv(view)
    path.parent.mkdir(parents=True, exist_ok=True)
    # newline="" keeps "\n" separators on every platform
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)
    logger.info(f"Exported {len(view)} products to {path}")
    return path
