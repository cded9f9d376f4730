"""Shared fixtures for product table tests."""

import pytest

from product_table.models import Category, Product


def build_product(
    id: int,
    title: str = "",
    price: float = 10.0,
    description: str = "A product",
    category: Category | None = None,
    images: list[str] | None = None,
) -> Product:
    return Product(
        id=id,
        title=title or f"Product {id}",
        price=price,
        description=description,
        category=category,
        images=images if images is not None else [f"https://img.example.com/{id}.png"],
    )


@pytest.fixture
def make_product():
    """Factory for Product records."""
    return build_product


@pytest.fixture
def twelve_products():
    """Products 1..12 with ascending prices."""
    return [build_product(i, price=float(i * 5)) for i in range(1, 13)]
