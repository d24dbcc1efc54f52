"""Account repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from reef.domain.model.account import Account
from reef.domain.value import AccountId, Email, Username


class AccountRepository(ABC):
    """Repository for Account aggregate.

    Defines the contract for account persistence operations.
    Implementations live in the infrastructure layer. Accounts returned by
    the finders carry their tokens.
    """

    @abstractmethod
    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID.

        Args:
            account_id: The account's unique identifier

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[Account]:
        """Find an account by username.

        Args:
            username: The account's username

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[Account]:
        """Find an account by email.

        Args:
            email: The account's email address

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_token(self, token: str) -> Optional[Account]:
        """Find the account owning a token secret.

        Args:
            token: Secret of any of the account's tokens

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, account: Account) -> Account:
        """Save an account (create or update), without its tokens.

        Args:
            account: The account to save

        Returns:
            The saved account

        Raises:
            DuplicateUserError: If username or email belong to another account
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all accounts."""
        pass
