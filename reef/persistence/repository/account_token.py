"""AccountToken repository implementation using PostgreSQL."""

from typing import Optional

from sqlalchemy import and_, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from reef.domain.error import InternalFailureError
from reef.domain.model import AccountToken
from reef.domain.repository import AccountTokenRepository
from reef.domain.value import AccountId, TokenKind
from reef.persistence.mappers import account_token_to_dict, row_to_account_token
from reef.persistence.tables import account_tokens_table


class PostgresAccountTokenRepository(AccountTokenRepository):
    """PostgreSQL implementation of AccountTokenRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_all_by_account_id(self, account_id: AccountId) -> list[AccountToken]:
        """Get all tokens of an account, oldest first."""
        stmt = (
            select(account_tokens_table)
            .where(account_tokens_table.c.account_id == account_id)
            .order_by(account_tokens_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_account_token(dict(row)) for row in result.mappings().all()]

    async def find_by_account_and_kind(
        self, account_id: AccountId, kind: TokenKind
    ) -> Optional[AccountToken]:
        """Get the account's token of one kind."""
        stmt = select(account_tokens_table).where(
            and_(
                account_tokens_table.c.account_id == account_id,
                account_tokens_table.c.kind == kind.value,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_account_token(dict(row)) if row else None

    async def save(self, token: AccountToken) -> AccountToken:
        """Save a token (create or update).

        Raises:
            InternalFailureError: If the owning account is missing or the
                (account, kind) pair is already taken by another row
        """
        stmt = select(account_tokens_table.c.id).where(
            account_tokens_table.c.id == token.id
        )
        existing = (await self.session.execute(stmt)).first()
        token_dict = account_token_to_dict(token)

        if existing:
            write = (
                account_tokens_table.update()
                .where(account_tokens_table.c.id == token.id)
                .values(**token_dict)
            )
        else:
            write = account_tokens_table.insert().values(**token_dict)

        try:
            await self.session.execute(write)
            await self.session.flush()
        except IntegrityError as e:
            raise InternalFailureError(
                f"Could not save {token.kind.value} token for account {token.account_id}"
            ) from e
        return token

    async def count(self) -> int:
        """Count all tokens."""
        result = await self.session.execute(
            select(func.count()).select_from(account_tokens_table)
        )
        return result.scalar_one()
