"""In-memory account repository for testing."""

from typing import Optional

from reef.domain.error import DuplicateUserError, InternalFailureError
from reef.domain.model import Account
from reef.domain.repository import AccountRepository
from reef.domain.value import AccountId, Email, Username

from .database import InMemoryDatabase


class InMemoryAccountRepository(AccountRepository):
    """In-memory implementation of AccountRepository for testing.

    Mirrors the schema: unique username, email and person, and the person
    must exist.
    """

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self._db = database or InMemoryDatabase()

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID."""
        account = self._db.accounts.get(account_id)
        return self._db.load_account(account) if account else None

    async def find_by_username(self, username: Username) -> Optional[Account]:
        """Find an account by username."""
        for account in self._db.accounts.values():
            if account.username == username:
                return self._db.load_account(account)
        return None

    async def find_by_email(self, email: Email) -> Optional[Account]:
        """Find an account by email."""
        for account in self._db.accounts.values():
            if account.email == email:
                return self._db.load_account(account)
        return None

    async def find_by_token(self, token: str) -> Optional[Account]:
        """Find the account owning a token secret."""
        for stored in self._db.tokens.values():
            if stored.token == token:
                return await self.find_by_id(stored.account_id)
        return None

    async def save(self, account: Account) -> Account:
        """Save or update an account, without its tokens."""
        if account.person_id not in self._db.persons:
            raise InternalFailureError(f"Person {account.person_id} does not exist")

        for other in self._db.accounts.values():
            if other.id == account.id:
                continue
            if other.username == account.username:
                raise DuplicateUserError("username", account.username.root)
            if other.email == account.email:
                raise DuplicateUserError("email", account.email.root)
            if other.person_id == account.person_id:
                raise InternalFailureError(
                    f"Person {account.person_id} already owns an account"
                )

        self._db.accounts[account.id] = account.model_copy(update={"tokens": []})
        return account

    async def count(self) -> int:
        """Count all accounts."""
        return len(self._db.accounts)
