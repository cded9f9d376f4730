"""Tests for plain-text rendering."""

from product_table.models import Category
from product_table.normalizer import PLACEHOLDER_DETAIL_URL
from product_table.pagination import paginate
from product_table.render import (
    NO_RESULTS,
    format_detail,
    format_header,
    format_pagination,
    format_price,
    format_table,
)
from product_table.view import SortDirection, SortKey, SortState


class TestFormatTable:
    """Tests for table rendering."""

    def test_rows_show_normalized_image_and_unknown_category(self, make_product):
        product = make_product(1, title="Tee", images=['["https://x/tee.png"]'])
        text = format_table(paginate([product], 10, 1))
        assert "https://x/tee.png" in text
        assert '["' not in text
        assert "Unknown" in text

    def test_empty_page_shows_no_results(self):
        text = format_table(paginate([], 10, 1))
        assert NO_RESULTS in text.splitlines()

    def test_header_marks_sorted_column(self):
        header = format_header(SortState(key=SortKey.PRICE, direction=SortDirection.DESC))
        assert "Price v" in header
        assert "Title -" in header


class TestFormatPagination:
    """Tests for the pagination bar."""

    def test_brackets_current_page(self, twelve_products):
        bar = format_pagination(paginate(twelve_products, 5, 2))
        assert bar == "< Previous 1 [2] 3 Next >"

    def test_disabled_edges(self, twelve_products):
        bar = format_pagination(paginate(twelve_products, 20, 1))
        assert bar == "  Previous [1] Next"


class TestFormatDetail:
    """Tests for the detail card."""

    def test_detail_uses_large_placeholder(self, make_product):
        product = make_product(
            5, title="Cap", price=12.5, category=Category(id=1, name="Hats"), images=[]
        )
        text = format_detail(product)
        assert text.startswith("=== Cap ===")
        assert PLACEHOLDER_DETAIL_URL in text
        assert "Hats" in text
        assert "$12.5" in text


def test_format_price():
    assert format_price(25.0) == "$25"
    assert format_price(12.5) == "$12.5"
