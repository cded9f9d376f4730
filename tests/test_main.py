"""Tests for the command-line entry point."""

import json

import httpx
import pytest

from product_table import main as cli
from product_table.source import ProductSource

PRODUCTS = [
    {"id": i, "title": title, "price": price, "description": f"{title} description",
     "category": {"id": 1, "name": "Clothes"}, "images": [f"https://x/{i}.png"]}
    for i, (title, price) in enumerate(
        [("Red Shirt", 20), ("Pants", 35), ("SHIRT XL", 15)], start=1
    )
]


@pytest.fixture
def api(monkeypatch):
    """Route the CLI's product source to an in-memory handler."""
    calls = []

    def handler(request):
        calls.append(request)
        if request.method == "GET":
            return httpx.Response(200, json=PRODUCTS)
        body = json.loads(request.content)
        if request.method == "POST":
            return httpx.Response(201, json={**body, "id": 99})
        product_id = int(request.url.path.rsplit("/", 1)[1])
        return httpx.Response(200, json={**body, "id": product_id})

    monkeypatch.setattr(
        cli,
        "_make_source",
        lambda config: ProductSource(
            api_url=config.api_url, transport=httpx.MockTransport(handler)
        ),
    )
    return calls


@pytest.fixture
def config_args(tmp_path):
    return ["-c", str(tmp_path / "product_table.yaml")]


class TestList:
    """Tests for the list command."""

    def test_filter_and_sort(self, api, config_args, capsys):
        assert cli.main([*config_args, "list", "-q", "shirt", "-s", "price"]) == 0
        out = capsys.readouterr().out
        assert out.index("SHIRT XL") < out.index("Red Shirt")
        assert "Pants" not in out

    def test_default_command_lists(self, api, config_args, capsys):
        assert cli.main(config_args) == 0
        assert "Pants" in capsys.readouterr().out

    def test_no_results(self, api, config_args, capsys):
        assert cli.main([*config_args, "list", "-q", "zzz"]) == 0
        assert "No products found" in capsys.readouterr().out

    def test_fetch_failure(self, monkeypatch, config_args, capsys):
        monkeypatch.setattr(
            cli,
            "_make_source",
            lambda config: ProductSource(
                api_url=config.api_url,
                transport=httpx.MockTransport(lambda request: httpx.Response(503)),
            ),
        )
        assert cli.main([*config_args, "list"]) == 1
        assert "Failed to fetch data" in capsys.readouterr().out


class TestShow:
    """Tests for the show command."""

    def test_show_product(self, api, config_args, capsys):
        assert cli.main([*config_args, "show", "2"]) == 0
        assert "=== Pants ===" in capsys.readouterr().out

    def test_unknown_product(self, api, config_args, capsys):
        assert cli.main([*config_args, "show", "42"]) == 1
        assert "Product #42 not found" in capsys.readouterr().out


class TestExport:
    """Tests for the export command."""

    def test_export_filtered_view(self, api, config_args, tmp_path):
        target = tmp_path / "export.csv"
        assert cli.main([*config_args, "export", "-q", "shirt", "-o", str(target)]) == 0
        lines = target.read_text(encoding="utf-8").split("\n")
        assert lines[0] == "id,title,price,description,category_name,image_url"
        assert lines[1] == '1,"Red Shirt",20,"Red Shirt description","Clothes",https://x/1.png'
        assert len(lines) == 3

    def test_nothing_to_export(self, api, config_args, tmp_path, capsys):
        target = tmp_path / "export.csv"
        assert cli.main([*config_args, "export", "-q", "zzz", "-o", str(target)]) == 1
        assert "No data to export" in capsys.readouterr().out
        assert not target.exists()


class TestSave:
    """Tests for the create and update commands."""

    def test_create(self, api, config_args, capsys):
        code = cli.main([
            *config_args, "create",
            "--title", "Hoodie", "--price", "40", "--description", "Warm",
            "--image", "https://x/hoodie.png",
        ])
        assert code == 0
        assert api[-1].method == "POST"
        assert "Product created successfully!" in capsys.readouterr().out

    def test_create_missing_fields(self, api, config_args, capsys):
        assert cli.main([*config_args, "create", "--title", "Hoodie"]) == 1
        assert "Please fill all fields" in capsys.readouterr().out
        assert all(request.method == "GET" for request in api)

    def test_update_keeps_unchanged_fields(self, api, config_args, capsys):
        assert cli.main([*config_args, "update", "2", "--price", "30"]) == 0
        body = json.loads(api[-1].content)
        assert api[-1].method == "PUT"
        assert body["title"] == "Pants"
        assert body["price"] == 30
        assert body["images"] == ["https://x/2.png"]
        assert "Product updated successfully!" in capsys.readouterr().out
