"""PostgreSQL repository implementations."""

from reef.persistence.repository.account import PostgresAccountRepository
from reef.persistence.repository.account_token import PostgresAccountTokenRepository
from reef.persistence.repository.person import PostgresPersonRepository
from reef.persistence.repository.transaction import PostgresTransactionManager

__all__ = [
    "PostgresAccountRepository",
    "PostgresAccountTokenRepository",
    "PostgresPersonRepository",
    "PostgresTransactionManager",
]
