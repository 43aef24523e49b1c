"""Domain models for users and shared product records."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class UserRecord:
    """Represents a household user stored in the database."""

    id: UUID
    first_name: str
    last_name: str
    email: str
    account_id: str | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class Product:
    """Catalog entry shared by every user, keyed by barcode."""

    code: str
    name: str
    brand: str
    category: str
