"""Transaction boundary interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class TransactionManager(ABC):
    """Scopes a group of repository writes to one atomic unit.

    Usage:
        async with transaction_manager.atomic():
            await person_repository.save(person)
            await account_repository.save(account)

    If the block raises, every write made inside it is undone and the
    exception propagates.
    """

    @abstractmethod
    def atomic(self) -> AbstractAsyncContextManager[None]:
        """Open an atomic block."""
        pass
