"""Password hashing domain service."""

import logfire
from passlib.context import CryptContext

from reef.config import AuthSettings
from reef.domain.error import ValidationFailedError

from .base import Service


class PasswordService(Service):
    """Hashes and verifies passwords with Argon2.

    Plain text passwords never leave this service in any other form than
    the salted hash.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize password service.

        Args:
            auth_settings: Authentication settings (password policy)
        """
        self.auth_settings = auth_settings
        self._context = CryptContext(schemes=["argon2"], deprecated="auto")

    def check_policy(self, password: str) -> None:
        """Enforce the password policy.

        Raises:
            ValidationFailedError: If the password is empty or too short
        """
        if not password or not password.strip():
            raise ValidationFailedError("Password must not be empty")
        if len(password) < self.auth_settings.password_min_length:
            raise ValidationFailedError(
                f"Password must be at least {self.auth_settings.password_min_length} characters"
            )

    def hash(self, password: str) -> str:
        """Return a salted one-way hash of ``password``."""
        with logfire.span("password_service.hash"):
            return self._context.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        """Check ``password`` against a stored hash.

        Unknown or malformed hashes count as a mismatch.
        """
        with logfire.span("password_service.verify"):
            try:
                return self._context.verify(password, password_hash)
            except ValueError as e:
                logfire.warn("Unusable password hash", error=str(e))
                return False
