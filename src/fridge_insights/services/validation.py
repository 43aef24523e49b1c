"""Input validation helpers for signup and item payloads."""

import re

from email_validator import EmailNotValidError, validate_email

from fridge_insights.errors import ValidationError

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 25
PASSWORD_MIN_LENGTH = 8

_SPECIAL_CHARACTERS = re.compile(r"[`!@#$%^&*()_+\-=\[\]{};':\"\\|,.<>/?~]")


def require_string(value: object, field_name: str) -> str:
    """Return the trimmed string or raise when it is missing or blank."""
    if value is None:
        raise ValidationError(f"{field_name} not provided")
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} is not a string")
    cleaned = value.strip()
    if not cleaned:
        raise ValidationError(f"{field_name} is an empty string")
    return cleaned


def validate_person_name(value: object, field_name: str) -> str:
    """Validate a first or last name."""
    name = require_string(value, field_name)
    if any(char.isdigit() for char in name):
        raise ValidationError(f"{field_name} contains a number")
    if len(name) < NAME_MIN_LENGTH:
        raise ValidationError(
            f"{field_name} should have at least {NAME_MIN_LENGTH} characters"
        )
    if len(name) > NAME_MAX_LENGTH:
        raise ValidationError(
            f"{field_name} should not be more than {NAME_MAX_LENGTH} characters"
        )
    return name


def validate_email_address(value: object) -> str:
    """Validate email syntax and return the address lowercased.

    The identity provider lowercases addresses, so stored emails must match.
    """
    email = require_string(value, "Email")
    try:
        result = validate_email(email, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValidationError("Email address is invalid") from exc
    return result.normalized.lower()


def validate_password(value: object) -> str:
    """Validate password strength rules."""
    password = require_string(value, "Password")
    if " " in password or len(password) < PASSWORD_MIN_LENGTH:
        raise ValidationError(
            f"Password must be at least {PASSWORD_MIN_LENGTH} characters long "
            "and contain no spaces"
        )
    if password == password.lower():
        raise ValidationError("Password should have at least one uppercase letter")
    if not any(char.isdigit() for char in password):
        raise ValidationError("Password should have at least one number")
    if not _SPECIAL_CHARACTERS.search(password):
        raise ValidationError("Password should have at least one special character")
    return password
