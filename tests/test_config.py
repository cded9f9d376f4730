"""Tests for viewer configuration."""

import pytest
import yaml
from pydantic import ValidationError

from product_table.config import ViewerConfig


class TestViewerConfig:
    """Tests for ViewerConfig loading and validation."""

    def test_defaults(self):
        config = ViewerConfig()
        assert config.api_url == "https://api.escuelajs.co/api/v1/products"
        assert config.fetch_limit == 200
        assert config.page_size == 10
        assert config.export_file == "products_export.csv"

    def test_missing_file_gives_defaults(self, tmp_path):
        assert ViewerConfig.load(tmp_path / "missing.yaml") == ViewerConfig()

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert ViewerConfig.load(path) == ViewerConfig()

    def test_load_overrides(self, tmp_path):
        path = tmp_path / "product_table.yaml"
        path.write_text(
            yaml.dump({"page_size": 20, "fetch_limit": 50}),
            encoding="utf-8",
        )
        config = ViewerConfig.load(path)
        assert config.page_size == 20
        assert config.fetch_limit == 50

    def test_save_round_trip(self, tmp_path):
        path = tmp_path / "product_table.yaml"
        config = ViewerConfig(page_size=5, export_file="out.csv")
        config.save(path)
        assert ViewerConfig.load(path) == config

    def test_page_size_must_be_an_option(self):
        with pytest.raises(ValidationError):
            ViewerConfig(page_size=7)

    def test_page_size_options_must_be_positive(self):
        with pytest.raises(ValidationError):
            ViewerConfig(page_size_options=[0, 10])
