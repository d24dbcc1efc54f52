"""Domain model entities for Reef."""

from reef.domain.model.account import Account
from reef.domain.model.account_token import AccountToken
from reef.domain.model.person import Person

__all__ = [
    "Account",
    "AccountToken",
    "Person",
]
