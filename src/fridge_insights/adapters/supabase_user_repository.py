"""Supabase-backed user repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from fridge_insights.domain.models import UserRecord
from fridge_insights.services.users import UserRepository

_COLUMNS = "id, first_name, last_name, email, account_id"


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        """Return the user with the given id, if present."""
        response = (
            self.client.table("users")
            .select(_COLUMNS)
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_user(response.data[0])

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user registered with an email, if present."""
        response = (
            self.client.table("users")
            .select(_COLUMNS)
            .eq("email", email)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_user(response.data[0])

    def create_user(
        self, first_name: str, last_name: str, email: str, account_id: str
    ) -> UserRecord:
        """Create a new user row and return it."""
        response = (
            self.client.table("users")
            .insert(
                {
                    "first_name": first_name,
                    "last_name": last_name,
                    "email": email,
                    "account_id": account_id,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")
        return _parse_user(response.data[0])


def _parse_user(row: dict[str, object]) -> UserRecord:
    return UserRecord(
        id=UUID(str(row["id"])),
        first_name=str(row.get("first_name", "")),
        last_name=str(row.get("last_name", "")),
        email=str(row.get("email", "")),
        account_id=row.get("account_id"),
    )
