"""Unit tests for the Email value object."""

import pytest
from pydantic import ValidationError

from userapi.domain.value import Email, normalize_email


class TestEmail:
    """Tests for Email normalization and validation."""

    def test_lowercases_and_strips(self):
        """Should store the address trimmed and lower-cased."""
        email = Email("  Ann@Example.COM ")

        assert email.root == "ann@example.com"
        assert str(email) == "ann@example.com"

    def test_case_variants_are_equal(self):
        """Should treat addresses differing only in case as the same value."""
        assert Email("ANN@example.com") == Email("ann@EXAMPLE.com")
        assert hash(Email("ANN@example.com")) == hash(Email("ann@example.com"))

    @pytest.mark.parametrize("value", ["", "ann", "ann@", "@example.com", "a b@example.com"])
    def test_rejects_malformed_address(self, value):
        """Should reject strings that are not email addresses."""
        with pytest.raises(ValidationError):
            Email(value)

    def test_normalize_email(self):
        """Should produce the canonical comparison form."""
        assert normalize_email(" Bob@Example.org ") == "bob@example.org"
