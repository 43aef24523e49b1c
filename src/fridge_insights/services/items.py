"""Item store: per-user refrigerated inventory."""

import logging
import math
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Protocol
from uuid import UUID

from fridge_insights.domain.items import (
    ITEM_FIELDS,
    RefrigeratedItem,
    parse_expiration_date,
)
from fridge_insights.domain.models import Product
from fridge_insights.errors import NotFoundError, ValidationError
from fridge_insights.services.products import ProductRepository
from fridge_insights.services.users import UserRepository
from fridge_insights.services.validation import require_string

# Upper bound of the numeric(10, 2) price column.
MAX_PRICE = Decimal("99999999.99")

_logger = logging.getLogger(__name__)


class ItemRepository(Protocol):
    """Persistence interface for refrigerated items."""

    def list_items(self, user_id: UUID) -> list[RefrigeratedItem]:
        """Return the user's items in insertion order."""

    def create_item(
        self, user_id: UUID, payload: dict[str, object]
    ) -> RefrigeratedItem:
        """Insert a new item for the user and return it."""

    def update_item(
        self, user_id: UUID, item_id: UUID, payload: dict[str, object]
    ) -> RefrigeratedItem | None:
        """Overwrite only the supplied fields of one item.

        Returns None when the user has no item with that id.
        """

    def delete_item(self, user_id: UUID, item_id: UUID) -> None:
        """Delete one item; deleting an absent item is a no-op."""


@dataclass
class ItemService:
    """Application service for adding, editing and removing fridge items."""

    repository: ItemRepository
    user_repository: UserRepository
    product_repository: ProductRepository

    def get_items(self, user_id: UUID) -> list[RefrigeratedItem]:
        """Return the current item list for a user."""
        self.require_user(user_id)
        return self.repository.list_items(user_id)

    def add_item(
        self,
        user_id: UUID,
        item: dict[str, object],
        manual_entry: bool = False,
    ) -> list[RefrigeratedItem]:
        """Add an item and return the updated list.

        Manually typed entries also seed the shared product catalog.
        """
        self.require_user(user_id)
        payload = normalize_item_fields(item, partial=False)
        if manual_entry:
            self._record_manual_product(payload)
        self.repository.create_item(user_id, payload)
        return self.repository.list_items(user_id)

    def update_item(
        self, user_id: UUID, item_id: UUID, fields: dict[str, object]
    ) -> list[RefrigeratedItem]:
        """Merge the supplied fields into one item and return the updated list."""
        self.require_user(user_id)
        payload = normalize_item_fields(fields, partial=True)
        if not payload:
            raise ValidationError("No item fields supplied")
        updated = self.repository.update_item(user_id, item_id, payload)
        if updated is None:
            raise NotFoundError(f"Item {item_id} not found")
        return self.repository.list_items(user_id)

    def remove_item(self, user_id: UUID, item_id: UUID) -> list[RefrigeratedItem]:
        """Remove an item if present and return the updated list."""
        self.require_user(user_id)
        self.repository.delete_item(user_id, item_id)
        return self.repository.list_items(user_id)

    def require_user(self, user_id: UUID) -> None:
        """Raise NotFoundError unless the user exists."""
        if self.user_repository.get_by_id(user_id) is None:
            raise NotFoundError("User not found")

    def _record_manual_product(self, payload: dict[str, object]) -> None:
        code = payload.get("code")
        if not code:
            _logger.info("Manual entry without a product code; catalog not updated")
            return
        self.product_repository.ensure_product(
            Product(
                code=str(code),
                name=str(payload["name"]),
                brand=str(payload.get("brand") or "Unknown"),
                category=str(payload.get("category") or "Unknown"),
            )
        )


def normalize_item_fields(
    fields: dict[str, object], *, partial: bool
) -> dict[str, object]:
    """Validate item fields and return the payload to persist.

    With ``partial`` set only the keys present in ``fields`` are returned.
    """
    unknown = set(fields) - set(ITEM_FIELDS)
    if unknown:
        raise ValidationError(f"Unknown item fields: {', '.join(sorted(unknown))}")

    payload: dict[str, object] = {}
    if "name" in fields or not partial:
        payload["name"] = require_string(fields.get("name"), "name")
    for key in ("code", "brand", "category"):
        if key in fields:
            payload[key] = _optional_string(fields[key], key)
    if "quantity" in fields:
        payload["quantity"] = _quantity(fields["quantity"])
    if "expiration_date" in fields:
        payload["expiration_date"] = _expiration(fields["expiration_date"])
    if "price" in fields:
        payload["price"] = _price(fields["price"])
    return payload


def _optional_string(value: object, field_name: str) -> str | None:
    if value is None:
        return None
    if isinstance(value, int | float) and not isinstance(value, bool):
        return str(value)
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} is not a string")
    return value.strip() or None


def _quantity(value: object) -> int | float | str | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValidationError("quantity must be a number or text")
    if isinstance(value, int | float):
        if isinstance(value, float) and not math.isfinite(value):
            raise ValidationError("quantity must be a finite number")
        if value < 0:
            raise ValidationError("quantity cannot be negative")
        return value
    if isinstance(value, str):
        return value.strip() or None
    raise ValidationError("quantity must be a number or text")


def _expiration(value: object) -> str | None:
    if value is None or value == "":
        return None
    parsed = parse_expiration_date(value)
    if parsed is None:
        raise ValidationError("expirationDate must be a calendar date (YYYY-MM-DD)")
    return parsed.isoformat()


def _price(value: object) -> Decimal | None:
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValidationError("price must be a decimal number")
    try:
        price = Decimal(str(value))
    except InvalidOperation as exc:
        raise ValidationError("price must be a decimal number") from exc
    if not price.is_finite() or price < 0:
        raise ValidationError("price must be a non-negative decimal number")
    if price > MAX_PRICE:
        raise ValidationError(f"price cannot exceed {MAX_PRICE}")
    return price
