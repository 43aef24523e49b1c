"""Tests for input validators."""

import pytest

from fridge_insights.errors import ValidationError
from fridge_insights.services.validation import (
    require_string,
    validate_email_address,
    validate_password,
    validate_person_name,
)


def test_require_string_trims() -> None:
    assert require_string("  milk ", "name") == "milk"


@pytest.mark.parametrize("value", [None, 3, "", "   "])
def test_require_string_rejects_missing_values(value: object) -> None:
    with pytest.raises(ValidationError):
        require_string(value, "name")


@pytest.mark.parametrize("value", ["A", "R2D2", "x" * 26])
def test_validate_person_name_rejects_invalid(value: str) -> None:
    with pytest.raises(ValidationError):
        validate_person_name(value, "First Name")


def test_validate_person_name_accepts_valid() -> None:
    assert validate_person_name("Grace", "First Name") == "Grace"


def test_validate_email_address() -> None:
    assert validate_email_address("ada@example.com") == "ada@example.com"
    assert validate_email_address("John.Doe@Example.COM") == "john.doe@example.com"
    with pytest.raises(ValidationError):
        validate_email_address("not-an-email")


@pytest.mark.parametrize(
    "value",
    ["Sh0rt!", "has space1!A", "alllower1!", "NoDigits!!", "NoSpecial123"],
)
def test_validate_password_rejects_weak(value: str) -> None:
    with pytest.raises(ValidationError):
        validate_password(value)


def test_validate_password_accepts_strong() -> None:
    assert validate_password("Fr1dge!Pass") == "Fr1dge!Pass"
