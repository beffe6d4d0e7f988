"""Unit tests for validators and the Annotated types built on them."""

import pytest
from pydantic import BaseModel, ValidationError

from src.domain.types import Email, FullName, OpaqueToken, Password, PhoneNumber
from src.domain.validators import (
    normalize_email,
    validate_email,
    validate_full_name,
    validate_phone_number,
    validate_strong_password,
    validate_token_format,
)


@pytest.mark.unit
class TestEmailValidation:
    def test_normalize_email_trims_and_lowercases(self):
        assert normalize_email("  Jane.Doe@Example.COM ") == "jane.doe@example.com"

    def test_validate_email_returns_normalized(self):
        assert validate_email(" User@Example.com") == "user@example.com"

    @pytest.mark.parametrize("value", ["plainaddress", "a@b", "@example.com", "a b@c.com"])
    def test_validate_email_rejects_malformed(self, value):
        with pytest.raises(ValueError, match="Invalid email format"):
            validate_email(value)


@pytest.mark.unit
class TestPasswordValidation:
    def test_strong_password_passes(self):
        assert validate_strong_password("SecurePass123!") == "SecurePass123!"

    @pytest.mark.parametrize(
        ("value", "message"),
        [
            ("Ab1!", "at least 8 characters"),
            ("securepass123!", "uppercase"),
            ("SECUREPASS123!", "lowercase"),
            ("SecurePass!!!", "digit"),
            ("SecurePass123", "special character"),
        ],
    )
    def test_weak_passwords_rejected(self, value, message):
        with pytest.raises(ValueError, match=message):
            validate_strong_password(value)


@pytest.mark.unit
class TestProfileValidation:
    def test_full_name_is_trimmed(self):
        assert validate_full_name("  Jane Doe  ") == "Jane Doe"

    def test_blank_full_name_rejected(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            validate_full_name("   ")

    def test_full_name_over_100_characters_rejected(self):
        with pytest.raises(ValueError, match="at most 100"):
            validate_full_name("x" * 101)

    @pytest.mark.parametrize("value", ["+84987654321", "0987654321", " 12345678 "])
    def test_valid_phone_numbers(self, value):
        assert validate_phone_number(value) == value.strip()

    @pytest.mark.parametrize("value", ["1234567", "+84-987-654", "phone", "+1234567890123456"])
    def test_invalid_phone_numbers(self, value):
        with pytest.raises(ValueError, match="Invalid phone number"):
            validate_phone_number(value)


@pytest.mark.unit
class TestTokenFormat:
    def test_hex_token_passes(self):
        assert validate_token_format(" abc123DEF456 ") == "abc123DEF456"

    def test_non_hex_token_rejected(self):
        with pytest.raises(ValueError, match="hexadecimal"):
            validate_token_format("not-hex!")


class _RegisterModel(BaseModel):
    full_name: FullName
    email: Email
    password: Password
    phone_number: PhoneNumber


class _TokenModel(BaseModel):
    token: OpaqueToken


@pytest.mark.unit
class TestAnnotatedTypes:
    def test_model_normalizes_fields(self):
        model = _RegisterModel(
            full_name=" Jane Doe ",
            email=" Jane@Example.com ",
            password="SecurePass123!",
            phone_number="+84987654321",
        )

        assert model.full_name == "Jane Doe"
        assert model.email == "jane@example.com"

    def test_model_rejects_weak_password(self):
        with pytest.raises(ValidationError) as exc_info:
            _RegisterModel(
                full_name="Jane Doe",
                email="jane@example.com",
                password="weakpassword",
                phone_number="+84987654321",
            )

        assert exc_info.value.errors()[0]["loc"] == ("password",)

    def test_opaque_token_too_short_rejected(self):
        with pytest.raises(ValidationError):
            _TokenModel(token="abc123")
