"""User signup and login."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from fridge_insights.domain.models import UserRecord
from fridge_insights.errors import NotFoundError, ValidationError
from fridge_insights.services.validation import (
    require_string,
    validate_email_address,
    validate_password,
    validate_person_name,
)


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        """Return the user with the given id, if present."""

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user registered with an email, if present."""

    def create_user(
        self, first_name: str, last_name: str, email: str, account_id: str
    ) -> UserRecord:
        """Create and return a new user record with an empty fridge."""


class IdentityClient(Protocol):
    """Interface for the external identity provider."""

    def create_account(self, email: str, password: str) -> str:
        """Create a login account and return its id."""

    def verify_token(self, token: str) -> str:
        """Verify an access token and return the email it belongs to."""


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository
    identity_client: IdentityClient

    def signup(  # noqa: PLR0913
        self,
        first_name: object,
        last_name: object,
        email: object,
        password: object,
        confirm_password: object,
    ) -> UserRecord:
        """Validate signup input, create the login account and the user."""
        cleaned_first = validate_person_name(first_name, "First Name")
        cleaned_last = validate_person_name(last_name, "Last Name")
        cleaned_email = validate_email_address(email)
        cleaned_password = validate_password(password)
        if cleaned_password != confirm_password:
            raise ValidationError("Password and Confirm password are not same")
        if self.repository.get_by_email(cleaned_email) is not None:
            raise ValidationError("An account with this email already exists")

        account_id = self.identity_client.create_account(
            cleaned_email, cleaned_password
        )
        return self.repository.create_user(
            cleaned_first, cleaned_last, cleaned_email, account_id
        )

    def login(self, token: object) -> UserRecord:
        """Resolve the user behind an identity token."""
        cleaned = require_string(token, "token")
        email = self.identity_client.verify_token(cleaned)
        user = self.repository.get_by_email(email.strip().lower())
        if user is None:
            raise NotFoundError("User not found")
        return user
