"""Unit tests for PasswordService."""

import pytest

from reef.config import AuthSettings
from reef.domain.error import ValidationFailedError
from reef.domain.service import PasswordService


@pytest.fixture
def password_service():
    return PasswordService(AuthSettings(password_min_length=8))


class TestPasswordService:
    """Tests for PasswordService."""

    def test_hash_is_salted(self, password_service):
        """Hashing twice gives different hashes that both verify."""
        first = password_service.hash("a password")
        second = password_service.hash("a password")

        assert first != second
        assert password_service.verify("a password", first)
        assert password_service.verify("a password", second)

    def test_verify_rejects_wrong_password(self, password_service):
        """A different password does not verify."""
        password_hash = password_service.hash("a password")

        assert not password_service.verify("another password", password_hash)

    def test_verify_unusable_hash(self, password_service):
        """A malformed stored hash counts as a mismatch."""
        assert not password_service.verify("a password", "not-a-hash")

    @pytest.mark.parametrize("password", ["", "   ", "1234567"])
    def test_policy_rejects(self, password_service, password):
        """Empty, blank and short passwords are refused."""
        with pytest.raises(ValidationFailedError):
            password_service.check_policy(password)

    def test_policy_accepts(self, password_service):
        """Passwords at the minimum length pass."""
        password_service.check_policy("12345678")
