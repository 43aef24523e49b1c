"""Supabase-backed repository for shared product records."""

from dataclasses import dataclass

from supabase import Client

from fridge_insights.domain.models import Product
from fridge_insights.services.products import ProductRepository


@dataclass
class SupabaseProductRepository(ProductRepository):
    """Supabase implementation for the product catalog cache."""

    client: Client

    def get_by_code(self, code: str) -> Product | None:
        """Return a product by barcode, if present."""
        response = (
            self.client.table("products")
            .select("code, name, brand, category")
            .eq("code", code)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return Product(
            code=str(row["code"]),
            name=str(row.get("name") or ""),
            brand=str(row.get("brand") or ""),
            category=str(row.get("category") or ""),
        )

    def ensure_product(self, product: Product) -> None:
        """Insert the product, leaving an existing row for the code untouched."""
        self.client.table("products").upsert(
            {
                "code": product.code,
                "name": product.name,
                "brand": product.brand,
                "category": product.category,
            },
            on_conflict="code",
            ignore_duplicates=True,
        ).execute()
