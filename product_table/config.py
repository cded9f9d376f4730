"""Settings for the product table."""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, model_validator

from .export import DEFAULT_EXPORT_FILE
from .normalizer import PLACEHOLDER_DETAIL_URL, PLACEHOLDER_THUMBNAIL_URL

DEFAULT_CONFIG_FILE = "product_table.yaml"


class ViewerConfig(BaseModel):
    """Configuration for fetching, paging and exporting products."""

    api_url: str = Field(
        default="https://api.escuelajs.co/api/v1/products",
        description="Products endpoint of the remote API",
    )
    fetch_offset: int = Field(default=0, ge=0, description="Offset of the initial fetch")
    fetch_limit: int = Field(default=200, ge=1, description="Products requested per fetch")
    timeout_seconds: float = Field(default=30.0, gt=0, description="HTTP timeout")
    page_size: int = Field(default=10, ge=1, description="Default products per page")
    page_size_options: list[int] = Field(
        default_factory=lambda: [5, 10, 20, 50],
        description="Page sizes a user can choose from",
    )
    thumbnail_placeholder: str = Field(default=PLACEHOLDER_THUMBNAIL_URL)
    detail_placeholder: str = Field(default=PLACEHOLDER_DETAIL_URL)
    export_file: str = Field(default=DEFAULT_EXPORT_FILE, description="CSV export path")

    @model_validator(mode="after")
    def _check_page_sizes(self) -> "ViewerConfig":
        if not self.page_size_options or any(size <= 0 for size in self.page_size_options):
            raise ValueError("page_size_options must be positive integers")
        if self.page_size not in self.page_size_options:
            raise ValueError(
                f"page_size {self.page_size} is not one of {self.page_size_options}"
            )
        return self

    def save(self, filepath: Path | str = DEFAULT_CONFIG_FILE) -> None:
        """Save configuration to YAML file."""
        filepath = Path(filepath)
        data = self.model_dump(mode="json")
        filepath.write_text(
            yaml.dump(data, allow_unicode=True, default_flow_style=False, sort_keys=False),
            encoding="utf-8",
        )

    @classmethod
    def load(cls, filepath: Path | str = DEFAULT_CONFIG_FILE) -> "ViewerConfig":
        """Load configuration from YAML file, falling back to defaults."""
        filepath = Path(filepath)
        if not filepath.exists():
            return cls()
        data = yaml.safe_load(filepath.read_text(encoding="utf-8"))
        if data is None:
            return cls()
        return cls.model_validate(data)
