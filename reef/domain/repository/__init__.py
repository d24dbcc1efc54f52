"""Repository interfaces for the Reef domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from reef.domain.repository.account import AccountRepository
from reef.domain.repository.account_token import AccountTokenRepository
from reef.domain.repository.person import PersonRepository
from reef.domain.repository.transaction import TransactionManager

__all__ = [
    "AccountRepository",
    "AccountTokenRepository",
    "PersonRepository",
    "TransactionManager",
]
