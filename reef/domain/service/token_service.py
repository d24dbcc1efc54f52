"""Account token domain service."""

import secrets
from datetime import datetime, timezone
from uuid import uuid4

import logfire

from reef.config import AuthSettings
from reef.domain.model import AccountToken
from reef.domain.repository import AccountTokenRepository
from reef.domain.value import AccountId, AccountTokenId, OAuthToken, TokenKind

from .base import Service


class TokenService(Service):
    """Issues and rotates account tokens.

    Tokens are replaced in place per kind: storing a token of a kind the
    account already holds overwrites the secret and bumps ``generation``.
    """

    def __init__(
        self,
        account_token_repository: AccountTokenRepository,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize token service.

        Args:
            account_token_repository: Account token repository
            auth_settings: Authentication settings (token entropy)
        """
        self.account_token_repository = account_token_repository
        self.auth_settings = auth_settings

    def generate_secret(self) -> str:
        """Generate a URL-safe permanent token secret."""
        return secrets.token_urlsafe(self.auth_settings.permanent_token_bytes)

    async def issue_permanent_token(self, account_id: AccountId) -> AccountToken:
        """Issue (or rotate) the account's permanent token.

        Args:
            account_id: Owning account

        Returns:
            Saved permanent token
        """
        with logfire.span("token_service.issue_permanent_token", account_id=str(account_id)):
            return await self._replace(
                account_id,
                TokenKind.PERMANENT,
                {"token": self.generate_secret()},
            )

    async def store_oauth_token(
        self, account_id: AccountId, oauth_token: OAuthToken
    ) -> AccountToken:
        """Store the provider's token pair as the account's OAuth token.

        Args:
            account_id: Owning account
            oauth_token: Pair returned by the identity provider

        Returns:
            Saved OAuth-derived token
        """
        with logfire.span("token_service.store_oauth_token", account_id=str(account_id)):
            return await self._replace(
                account_id,
                TokenKind.OAUTH,
                {
                    "token": oauth_token.access_token,
                    "refresh_token": oauth_token.refresh_token,
                    "token_type": oauth_token.token_type,
                    "scope": oauth_token.scope,
                    "issued_at": datetime.fromtimestamp(
                        oauth_token.created_at, tz=timezone.utc
                    ),
                },
            )

    async def _replace(
        self, account_id: AccountId, kind: TokenKind, values: dict
    ) -> AccountToken:
        """Create the token of ``kind`` or overwrite it in place."""
        now = datetime.now(timezone.utc)
        existing = await self.account_token_repository.find_by_account_and_kind(
            account_id, kind
        )

        if existing:
            token = existing.model_copy(
                update={
                    **values,
                    "generation": existing.generation + 1,
                    "updated_at": now,
                }
            )
        else:
            token = AccountToken(
                id=AccountTokenId(uuid4()),
                account_id=account_id,
                kind=kind,
                generation=0,
                created_at=now,
                updated_at=now,
                **values,
            )

        saved = await self.account_token_repository.save(token)
        logfire.info(
            "Account token stored",
            account_id=str(account_id),
            kind=kind.value,
            generation=saved.generation,
        )
        return saved
