"""Domain value objects for Reef."""

from reef.domain.value.identifiers import AccountId, AccountTokenId, PersonId
from reef.domain.value.types import (
    Email,
    OAuthToken,
    ProvisionedIdentity,
    Slug,
    TokenKind,
    Username,
)

__all__ = [
    # Identifiers
    "PersonId",
    "AccountId",
    "AccountTokenId",
    # Types
    "Email",
    "OAuthToken",
    "ProvisionedIdentity",
    "Slug",
    "TokenKind",
    "Username",
]
