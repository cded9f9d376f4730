"""Normalization of product fields for display."""

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import Product

PLACEHOLDER_THUMBNAIL_URL = "https://via.placeholder.com/50"
PLACEHOLDER_DETAIL_URL = "https://via.placeholder.com/300"
UNKNOWN_CATEGORY = "Unknown"

# The API sometimes serializes an image array into a single string: '["https://..."]'
_WRAPPED_PREFIX = '["'
_WRAPPED_SUFFIX = '"]'


def normalize_image_url(
    images: Sequence[str] | None,
    placeholder: str = PLACEHOLDER_THUMBNAIL_URL,
) -> str:
    """Get a usable URL from a product's first image entry.

    Args:
        images: Raw image entries of a product
        placeholder: URL returned when there is no image

    Returns:
        The first image URL, unwrapped if it was array-encoded
    """
    if not images:
        return placeholder

    raw_url = images[0]
    if not isinstance(raw_url, str):
        return raw_url

    if (
        len(raw_url) >= len(_WRAPPED_PREFIX) + len(_WRAPPED_SUFFIX)
        and raw_url.startswith(_WRAPPED_PREFIX)
        and raw_url.endswith(_WRAPPED_SUFFIX)
    ):
        return raw_url[len(_WRAPPED_PREFIX):-len(_WRAPPED_SUFFIX)]

    return raw_url


def category_name(product: "Product", default: str = UNKNOWN_CATEGORY) -> str:
    """Get the category display name, or a sentinel when there is none."""
    if product.category is None:
        return default
    return product.category.name
