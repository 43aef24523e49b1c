"""Supabase Auth identity client."""

import logging
from dataclasses import dataclass

from supabase import Client

from fridge_insights.errors import InvalidCredentialError
from fridge_insights.services.users import IdentityClient

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseIdentityClient(IdentityClient):
    """Identity provider backed by Supabase Auth."""

    client: Client

    def create_account(self, email: str, password: str) -> str:
        """Create a confirmed login account and return its id."""
        try:
            response = self.client.auth.admin.create_user(
                {"email": email, "password": password, "email_confirm": True}
            )
        except Exception as exc:
            _logger.warning("Supabase Auth rejected signup: %s", exc)
            message = str(exc) or "Could not create account"
            raise InvalidCredentialError(message) from exc
        user = getattr(response, "user", None)
        if user is None:
            raise InvalidCredentialError("Could not create account")
        return str(user.id)

    def verify_token(self, token: str) -> str:
        """Verify an access token and return its email."""
        try:
            response = self.client.auth.get_user(token)
        except Exception as exc:
            _logger.info("Supabase Auth rejected token: %s", exc)
            raise InvalidCredentialError("Invalid Token") from exc
        user = getattr(response, "user", None)
        email = getattr(user, "email", None)
        if not email:
            raise InvalidCredentialError("Invalid Token")
        return str(email)
