"""Unit tests for PasswordService."""

from unittest.mock import patch


class TestPasswordService:
    """Tests for Argon2 hashing and verification."""

    def test_hash_is_salted(self, password_service):
        """Should produce a different hash for the same password each time."""
        first = password_service.hash("Secret1")
        second = password_service.hash("Secret1")

        assert first != second
        assert first.startswith("$argon2id$")

    def test_verify_matching_password(self, password_service):
        """Should accept the password the hash was made from."""
        password_hash = password_service.hash("Secret1")

        assert password_service.verify("Secret1", password_hash) is True

    def test_verify_wrong_password(self, password_service):
        """Should reject a different password."""
        password_hash = password_service.hash("Secret1")

        assert password_service.verify("secret1", password_hash) is False

    def test_verify_malformed_hash(self, password_service):
        """Should return False instead of raising for a garbage hash."""
        assert password_service.verify("Secret1", "not-a-hash") is False

    def test_verify_dummy_spends_one_verification(self, password_service):
        """Should run exactly one verification against the internal hash."""
        with patch.object(
            password_service, "verify", wraps=password_service.verify
        ) as verify:
            password_service.verify_dummy("anything")

        assert verify.call_count == 1
