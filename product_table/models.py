"""Data models for the product table."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .normalizer import normalize_image_url


class Category(BaseModel):
    """Product category reference."""

    model_config = ConfigDict(extra="ignore")

    id: int = Field(description="Category identifier")
    name: str = Field(description="Category display name")


class Product(BaseModel):
    """A product record as served by the remote API."""

    model_config = ConfigDict(extra="ignore")

    id: int = Field(description="Product identifier, assigned by the API")
    title: str = Field(description="Product title")
    price: float = Field(ge=0, description="Product price")
    description: str = Field(default="", description="Product description")
    category: Category | None = Field(default=None)
    images: list[str] = Field(default_factory=list, description="Raw image URLs")

    def merged(self, saved: "Product") -> "Product":
        """Return a copy with the fields of a saved record laid over this one.

        Args:
            saved: Record returned by the API after an update

        Returns:
            Product with this record's id and the saved field values
        """
        update = {
            name: getattr(saved, name)
            for name in saved.model_fields_set
            if name != "id"
        }
        return self.model_copy(update=update)


class ProductDraft(BaseModel):
    """Create/update payload sent to the product API."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(min_length=1)
    price: float = Field(gt=0)
    description: str = Field(min_length=1)
    category_id: int = Field(default=1, alias="categoryId")
    images: list[str] = Field(min_length=1)

    @field_validator("title", "description")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("images")
    @classmethod
    def _image_url_present(cls, value: list[str]) -> list[str]:
        if not value[0].strip():
            raise ValueError("image URL must not be blank")
        return value

    @classmethod
    def from_fields(
        cls,
        title: str,
        price: float,
        description: str,
        image_url: str,
        category_id: int = 1,
    ) -> "ProductDraft":
        """Build a draft from form-style fields with a single image URL."""
        return cls(
            title=title,
            price=price,
            description=description,
            category_id=category_id,
            images=[image_url],
        )

    @classmethod
    def from_product(cls, product: Product) -> "ProductDraft":
        """Build an edit draft prefilled from an existing product."""
        return cls.from_fields(
            title=product.title,
            price=product.price,
            description=product.description,
            image_url=normalize_image_url(product.images, placeholder=""),
            category_id=product.category.id if product.category else 1,
        )

    def to_payload(self) -> dict:
        """Serialize to the JSON body expected by the API."""
        return self.model_dump(mode="json", by_alias=True)
