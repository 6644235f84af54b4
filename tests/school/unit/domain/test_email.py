"""Tests for the Email value object."""

import pytest

from school.domain.shared.exceptions import ErrorCode, ValidationError
from school.domain.shared.value_objects import Email
from school.domain.shared.value_objects.email import InvalidEmailError


class TestEmail:
    """Test cases for Email value object."""

    def test_email_creation_valid(self):
        """Test creating an Email from a valid address."""
        email = Email("alice@example.com")

        assert email.value == "alice@example.com"
        assert str(email) == "alice@example.com"

    def test_email_is_trimmed(self):
        """Test that surrounding whitespace is removed."""
        email = Email("  alice@example.com ")

        assert email.value == "alice@example.com"

    def test_email_keeps_case(self):
        """Test that the address itself is not case folded."""
        email = Email("Alice@Example.com")

        assert email.value == "Alice@Example.com"

    @pytest.mark.parametrize("value", ["", "   ", None])
    def test_empty_email_error(self, value):
        """Test that a missing address is rejected."""
        with pytest.raises(InvalidEmailError, match="Email is required"):
            Email(value)

    def test_email_without_at_sign_error(self):
        """Test that an address without '@' is rejected."""
        with pytest.raises(InvalidEmailError, match="Email is invalid"):
            Email("alice.example.com")

    def test_invalid_email_is_validation_error(self):
        """Test that InvalidEmailError carries the INVALID_EMAIL code."""
        with pytest.raises(ValidationError) as exc_info:
            Email("not-an-email")

        assert exc_info.value.code == ErrorCode.INVALID_EMAIL

    def test_email_equality(self):
        """Test value equality of two Email instances."""
        assert Email("alice@example.com") == Email(" alice@example.com")
        assert Email("alice@example.com") != Email("bob@example.com")

    def test_email_is_immutable(self):
        """Test that the value cannot be reassigned."""
        email = Email("alice@example.com")

        with pytest.raises(AttributeError):
            email.value = "bob@example.com"  # type: ignore[misc]
