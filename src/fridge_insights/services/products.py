"""Shared product catalog lookups."""

import logging
from dataclasses import dataclass
from typing import Protocol

import httpx

from fridge_insights.adapters.open_food_facts_client import ProductCatalogClient
from fridge_insights.domain.models import Product
from fridge_insights.errors import NotFoundError, UpstreamError
from fridge_insights.services.validation import require_string

_UNKNOWN = "Unknown"

_logger = logging.getLogger(__name__)


class ProductRepository(Protocol):
    """Persistence interface for shared product records."""

    def get_by_code(self, code: str) -> Product | None:
        """Return the product for a barcode, if present."""

    def ensure_product(self, product: Product) -> None:
        """Insert the product unless one with the same code already exists."""


@dataclass
class ProductService:
    """Resolve barcodes from the local store, falling back to the catalog."""

    repository: ProductRepository
    catalog_client: ProductCatalogClient

    async def lookup(self, code: object) -> Product:
        """Return the product for a barcode, caching catalog hits locally."""
        cleaned = require_string(code, "code")
        existing = self.repository.get_by_code(cleaned)
        if existing:
            return existing

        try:
            payload = await self.catalog_client.fetch_product(cleaned)
        except (httpx.HTTPError, ValueError) as exc:
            _logger.exception("Product catalog lookup failed: code=%s", cleaned)
            raise UpstreamError("Product catalog is unavailable") from exc
        if not isinstance(payload, dict):
            _logger.error(
                "Product catalog returned %s: code=%s", type(payload).__name__, cleaned
            )
            raise UpstreamError("Product catalog returned an unexpected response")

        if payload.get("status") == 0 or not isinstance(payload.get("product"), dict):
            _logger.info("Product not found in catalog: code=%s", cleaned)
            raise NotFoundError("Product not found")

        product = _parse_catalog_product(cleaned, payload["product"])
        self.repository.ensure_product(product)
        return product


def _parse_catalog_product(code: str, raw: dict[str, object]) -> Product:
    """Map an Open Food Facts product payload onto a Product."""
    categories = raw.get("categories")
    category = _UNKNOWN
    if isinstance(categories, str) and categories.strip():
        category = categories.split(",")[0].strip() or _UNKNOWN
    elif isinstance(categories, list) and categories:
        category = str(categories[0]).strip() or _UNKNOWN
    return Product(
        code=code,
        name=str(raw.get("product_name") or _UNKNOWN),
        brand=str(raw.get("brands") or _UNKNOWN),
        category=category,
    )
