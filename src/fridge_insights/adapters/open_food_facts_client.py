"""Open Food Facts product catalog client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class ProductCatalogClient(Protocol):
    """Interface for barcode lookups against a product catalog."""

    async def fetch_product(self, code: str) -> dict[str, object]:
        """Return the raw catalog payload for a barcode."""


@dataclass
class HttpxOpenFoodFactsClient(ProductCatalogClient):
    """HTTPX-backed Open Food Facts client."""

    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, base_url: str) -> "HttpxOpenFoodFactsClient":
        """Create a catalog client with a managed httpx session."""
        return cls(base_url=base_url, http_client=httpx.AsyncClient())

    async def fetch_product(self, code: str) -> dict[str, object]:
        """Fetch a product by barcode."""
        url = f"{self.base_url}/product/{code}.json"
        response = await self.http_client.get(url, timeout=15)
        if response.status_code == httpx.codes.NOT_FOUND:
            return {"status": 0}
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
