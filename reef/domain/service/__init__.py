"""Domain services."""

from .account_service import AccountService
from .base import Service
from .identity_provider import IdentityProvider
from .password_service import PasswordService
from .token_service import TokenService

__all__ = [
    "AccountService",
    "IdentityProvider",
    "PasswordService",
    "Service",
    "TokenService",
]
