"""PostgreSQL transaction manager."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from reef.domain.repository import TransactionManager


class PostgresTransactionManager(TransactionManager):
    """Atomic blocks as SAVEPOINTs inside the request session.

    The request session itself is committed or rolled back by the
    persistence provider; a savepoint lets a failed block undo its own
    writes even when the caller handles the exception.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        savepoint = await self.session.begin_nested()
        try:
            yield
        except Exception as e:
            logfire.warn("Rolling back atomic block", error=str(e))
            await savepoint.rollback()
            raise
        else:
            await savepoint.commit()
