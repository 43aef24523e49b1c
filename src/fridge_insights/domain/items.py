"""Domain models for refrigerated items."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

Quantity = int | float | str | None

ITEM_FIELDS = (
    "code",
    "name",
    "brand",
    "category",
    "quantity",
    "expiration_date",
    "price",
)


@dataclass(frozen=True)
class RefrigeratedItem:
    """A single food unit tracked in a user's fridge."""

    id: UUID
    user_id: UUID
    name: str
    code: str | None = None
    brand: str | None = None
    category: str | None = None
    quantity: Quantity = None
    expiration_date: str | None = None
    price: Decimal | None = None

    @property
    def expiration_day(self) -> date | None:
        """Calendar date the item expires on, if the stored value parses."""
        return parse_expiration_date(self.expiration_date)


def parse_expiration_date(value: object) -> date | None:
    """Parse a stored expiration value down to its calendar date.

    Accepts plain ISO dates and ISO timestamps. The time-of-day part of a
    timestamp is discarded without any timezone conversion.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    cleaned = value.strip()
    if not cleaned:
        return None
    try:
        return date.fromisoformat(cleaned)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(cleaned).date()
    except ValueError:
        return None
