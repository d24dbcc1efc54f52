"""Account token repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from reef.domain.model.account_token import AccountToken
from reef.domain.value import AccountId, TokenKind


class AccountTokenRepository(ABC):
    """Repository for AccountToken entity.

    At most one token per (account, kind) exists.
    """

    @abstractmethod
    async def find_all_by_account_id(self, account_id: AccountId) -> list[AccountToken]:
        """Get all tokens of an account, oldest first.

        Args:
            account_id: The account's unique identifier

        Returns:
            List of tokens (may be empty)
        """
        pass

    @abstractmethod
    async def find_by_account_and_kind(
        self, account_id: AccountId, kind: TokenKind
    ) -> Optional[AccountToken]:
        """Get the account's token of one kind.

        Args:
            account_id: The account's unique identifier
            kind: Token kind

        Returns:
            The token if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, token: AccountToken) -> AccountToken:
        """Save a token (create or update).

        Args:
            token: The token to save

        Returns:
            The saved token

        Raises:
            InternalFailureError: If the owning account does not exist
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all tokens."""
        pass
