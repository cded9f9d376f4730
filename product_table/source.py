"""Async client for the remote product API."""

import logging

import httpx
from pydantic import TypeAdapter, ValidationError

from .errors import ProductSourceError
from .models import Product, ProductDraft

logger = logging.getLogger(__name__)

_PRODUCT_LIST = TypeAdapter(list[Product])


class ProductSource:
    """Reads and writes product records over HTTP."""

    def __init__(
        self,
        api_url: str = "https://api.escuelajs.co/api/v1/products",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize source.

        Args:
            api_url: Products endpoint
            timeout: Request timeout in seconds
            transport: Optional transport, e.g. a mock in tests
        """
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "ProductSource":
        """Async context manager entry."""
        self._client = httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=True,
            headers={"Content-Type": "application/json"},
            transport=self._transport,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        if self._client:
            await self._client.aclose()
            self._client = None

    def _require_client(self) -> httpx.AsyncClient:
        if not self._client:
            raise RuntimeError("Source not started. Use async context manager.")
        return self._client

    async def fetch_all(self, offset: int = 0, limit: int = 200) -> list[Product]:
        """Fetch a batch of products.

        Args:
            offset: Index of the first product
            limit: Maximum number of products

        Returns:
            Products in API order

        Raises:
            ProductSourceError: If the request fails or the payload is invalid
        """
        client = self._require_client()
        try:
            response = await client.get(
                self.api_url, params={"offset": offset, "limit": limit}
            )
            response.raise_for_status()
            products = _PRODUCT_LIST.validate_python(response.json())
        except (httpx.HTTPError, ValueError, ValidationError) as e:
            logger.error(f"Error fetching products: {e}")
            raise ProductSourceError("Failed to fetch data") from e

        logger.info(f"Fetched {len(products)} products")
        return products

    async def create(self, draft: ProductDraft) -> Product:
        """Create a product and return the saved record."""
        return await self._save("POST", self.api_url, draft)

    async def update(self, product_id: int, draft: ProductDraft) -> Product:
        """Replace a product's fields and return the saved record."""
        return await self._save("PUT", f"{self.api_url}/{product_id}", draft)

    async def _save(self, method: str, url: str, draft: ProductDraft) -> Product:
        client = self._require_client()
        try:
            response = await client.request(method, url, json=draft.to_payload())
            response.raise_for_status()
            product = Product.model_validate(response.json())
        except (httpx.HTTPError, ValueError, ValidationError) as e:
            logger.error(f"Error saving product: {e}")
            raise ProductSourceError("Failed to save product") from e

        logger.info(f"Saved product #{product.id}")
        return product
