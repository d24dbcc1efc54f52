"""PostgreSQL implementation of Account repository."""

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from reef.domain.error import DuplicateUserError, InternalFailureError
from reef.domain.model import Account
from reef.domain.repository import AccountRepository
from reef.domain.value import AccountId, Email, Username
from reef.persistence.mappers import (
    account_to_dict,
    row_to_account,
    row_to_account_token,
)
from reef.persistence.tables import account_tokens_table, accounts_table


class PostgresAccountRepository(AccountRepository):
    """PostgreSQL implementation of AccountRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID."""
        return await self._find_one(accounts_table.c.id == account_id)

    async def find_by_username(self, username: Username) -> Optional[Account]:
        """Find an account by username."""
        return await self._find_one(accounts_table.c.username == username.root)

    async def find_by_email(self, email: Email) -> Optional[Account]:
        """Find an account by email."""
        return await self._find_one(accounts_table.c.email == email.root)

    async def find_by_token(self, token: str) -> Optional[Account]:
        """Find the account owning a token secret.

        Joins account_tokens and accounts.
        """
        stmt = (
            select(accounts_table)
            .select_from(
                accounts_table.join(
                    account_tokens_table,
                    accounts_table.c.id == account_tokens_table.c.account_id,
                )
            )
            .where(account_tokens_table.c.token == token)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return await self._with_tokens(dict(row)) if row else None

    async def save(self, account: Account) -> Account:
        """Save an account (create or update), without its tokens.

        Raises:
            DuplicateUserError: If a unique constraint rejects the write
        """
        existing = await self._exists(account.id)
        account_dict = account_to_dict(account)

        if existing:
            stmt = (
                accounts_table.update()
                .where(accounts_table.c.id == account.id)
                .values(**account_dict)
            )
        else:
            stmt = accounts_table.insert().values(**account_dict)

        try:
            await self.session.execute(stmt)
            await self.session.flush()
        except IntegrityError as e:
            reason = str(e.orig)
            if "uq_accounts_email" in reason:
                raise DuplicateUserError("email", account.email.root) from e
            if "uq_accounts_username" in reason:
                raise DuplicateUserError("username", account.username.root) from e
            raise InternalFailureError(f"Could not save account {account.id}") from e
        return account

    async def count(self) -> int:
        """Count all accounts."""
        result = await self.session.execute(
            select(func.count()).select_from(accounts_table)
        )
        return result.scalar_one()

    async def _exists(self, account_id: AccountId) -> bool:
        stmt = select(accounts_table.c.id).where(accounts_table.c.id == account_id)
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def _find_one(self, condition) -> Optional[Account]:
        stmt = select(accounts_table).where(condition)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return await self._with_tokens(dict(row)) if row else None

    async def _with_tokens(self, row: dict) -> Account:
        """Map an account row, loading its tokens oldest first."""
        stmt = (
            select(account_tokens_table)
            .where(account_tokens_table.c.account_id == row["id"])
            .order_by(account_tokens_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        tokens = [row_to_account_token(dict(r)) for r in result.mappings().all()]
        return row_to_account(row, tokens)
