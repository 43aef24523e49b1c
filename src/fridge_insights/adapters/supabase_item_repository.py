"""Supabase-backed repository for refrigerated items."""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID, uuid4

from supabase import Client

from fridge_insights.domain.items import RefrigeratedItem
from fridge_insights.services.items import ItemRepository

_COLUMNS = (
    "id, user_id, code, name, brand, category, quantity, expiration_date, price"
)


@dataclass
class SupabaseItemRepository(ItemRepository):
    """Supabase implementation for items, one row per item.

    Each write touches a single row scoped by user and item id, so
    concurrent edits to different items never overwrite each other.
    """

    client: Client

    def list_items(self, user_id: UUID) -> list[RefrigeratedItem]:
        """Return the user's items in insertion order."""
        response = (
            self.client.table("refrigerated_items")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_item(row) for row in response.data or []]

    def create_item(
        self, user_id: UUID, payload: dict[str, object]
    ) -> RefrigeratedItem:
        """Insert an item row and return it."""
        response = (
            self.client.table("refrigerated_items")
            .insert(
                {
                    "id": str(uuid4()),
                    "user_id": str(user_id),
                    **_serialize(payload),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create refrigerated item")
        return _parse_item(response.data[0])

    def update_item(
        self, user_id: UUID, item_id: UUID, payload: dict[str, object]
    ) -> RefrigeratedItem | None:
        """Update the supplied columns of one item."""
        response = (
            self.client.table("refrigerated_items")
            .update(_serialize(payload))
            .eq("user_id", str(user_id))
            .eq("id", str(item_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_item(response.data[0])

    def delete_item(self, user_id: UUID, item_id: UUID) -> None:
        """Delete one item row if it exists."""
        self.client.table("refrigerated_items").delete().eq(
            "user_id", str(user_id)
        ).eq("id", str(item_id)).execute()


def _serialize(payload: dict[str, object]) -> dict[str, object]:
    """Convert values PostgREST cannot encode as JSON."""
    return {
        key: str(value) if isinstance(value, Decimal) else value
        for key, value in payload.items()
    }


def _parse_item(row: dict[str, object]) -> RefrigeratedItem:
    price_raw = row.get("price")
    return RefrigeratedItem(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        name=str(row.get("name", "")),
        code=row.get("code"),
        brand=row.get("brand"),
        category=row.get("category"),
        quantity=row.get("quantity"),
        expiration_date=row.get("expiration_date"),
        price=Decimal(str(price_raw)) if price_raw is not None else None,
    )
