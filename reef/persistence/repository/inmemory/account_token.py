"""In-memory account token repository for testing."""

from typing import Optional

from reef.domain.error import InternalFailureError
from reef.domain.model import AccountToken
from reef.domain.repository import AccountTokenRepository
from reef.domain.value import AccountId, TokenKind

from .database import InMemoryDatabase


class InMemoryAccountTokenRepository(AccountTokenRepository):
    """In-memory implementation of AccountTokenRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self._db = database or InMemoryDatabase()

    async def find_all_by_account_id(self, account_id: AccountId) -> list[AccountToken]:
        """Get all tokens of an account, oldest first."""
        return self._db.tokens_of(account_id)

    async def find_by_account_and_kind(
        self, account_id: AccountId, kind: TokenKind
    ) -> Optional[AccountToken]:
        """Get the account's token of one kind."""
        for token in self._db.tokens.values():
            if token.account_id == account_id and token.kind == kind:
                return token
        return None

    async def save(self, token: AccountToken) -> AccountToken:
        """Save or update a token."""
        if token.account_id not in self._db.accounts:
            raise InternalFailureError(f"Account {token.account_id} does not exist")

        for other in self._db.tokens.values():
            if (
                other.id != token.id
                and other.account_id == token.account_id
                and other.kind == token.kind
            ):
                raise InternalFailureError(
                    f"Account {token.account_id} already has a {token.kind.value} token"
                )

        self._db.tokens[token.id] = token
        return token

    async def count(self) -> int:
        """Count all tokens."""
        return len(self._db.tokens)
