"""In-memory repository implementations for testing."""

from .account import InMemoryAccountRepository
from .account_token import InMemoryAccountTokenRepository
from .database import InMemoryDatabase
from .person import InMemoryPersonRepository
from .transaction import InMemoryTransactionManager

__all__ = [
    "InMemoryAccountRepository",
    "InMemoryAccountTokenRepository",
    "InMemoryDatabase",
    "InMemoryPersonRepository",
    "InMemoryTransactionManager",
]
