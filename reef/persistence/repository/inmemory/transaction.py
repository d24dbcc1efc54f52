"""In-memory transaction manager for testing."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from reef.domain.repository import TransactionManager

from .database import InMemoryDatabase


class InMemoryTransactionManager(TransactionManager):
    """Snapshots the store on entry and restores it if the block raises."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self._db = database

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        snapshot = self._db.snapshot()
        try:
            yield
        except Exception:
            self._db.restore(snapshot)
            raise
