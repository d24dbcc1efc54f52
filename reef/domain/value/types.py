"""Domain value objects for Reef accounts.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from reef.domain.value.common import RootValueObject, ValueObject


class TokenKind(str, Enum):
    """Kind of secret stored for an account.

    An account holds at most one token of each kind.
    """

    PERMANENT = "permanent"  # long-lived local API credential (PRIVATE-TOKEN)
    OAUTH = "oauth"  # short-lived pair issued by the identity provider


class Username(RootValueObject[str]):
    """Unique login name.

    3-100 characters of letters, digits, ``_``, ``.`` and ``-``, starting
    with a letter or digit (Gitlab accepts the same alphabet).
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not re.match(r"^[A-Za-z0-9][A-Za-z0-9_.-]{2,99}$", v):
            raise ValueError(
                "Username must be 3-100 characters of letters, digits, '_', '.' or '-', "
                "starting with a letter or digit"
            )
        return v


class Email(RootValueObject[str]):
    """Email address, stored lower-cased so uniqueness is case-insensitive."""

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate and normalize email."""
        v = v.strip().lower()
        if not re.match(r"^[^@\s]+@[^@\s]+$", v):
            raise ValueError("Email must contain a single '@' and no whitespace")
        if len(v) > 255:
            raise ValueError("Email must be at most 255 characters")
        return v


class Slug(RootValueObject[str]):
    """URL-safe slug identifying a person.

    Must be lowercase, alphanumeric with hyphens, 1-100 characters.
    Examples: 'alice', 'data-scientist-42'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if not re.match(r"^[a-z0-9]+(?:-[a-z0-9]+)*$", v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        if len(v) < 1 or len(v) > 100:
            raise ValueError("Slug must be 1-100 characters")
        return v

    @classmethod
    def from_username(cls, username: Username) -> "Slug":
        """Derive the person slug from a username.

        ``Alice.Smith_2`` becomes ``alice-smith-2``.
        """
        slug = re.sub(r"[^a-z0-9]+", "-", username.root.lower()).strip("-")
        return cls(slug[:100].rstrip("-"))


class OAuthToken(ValueObject):
    """Token pair issued by the identity provider.

    Transient: mapped into an ``AccountToken`` or a response, never stored as is.
    """

    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    scope: str = "api"
    created_at: int  # seconds since epoch, as reported by the provider


class ProvisionedIdentity(ValueObject):
    """Result of creating the provider-side companion of a local account."""

    gitlab_user_id: int
    token: OAuthToken
