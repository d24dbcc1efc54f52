"""Shared in-memory store backing the in-memory repositories.

Holds the rows of all three account tables so the repositories can enforce
the same uniqueness and referential rules as the database schema.
"""

from dataclasses import dataclass, field

from reef.domain.model import Account, AccountToken, Person
from reef.domain.value import AccountId, AccountTokenId, PersonId


@dataclass
class InMemoryDatabase:
    """Rows keyed by primary key. Stored accounts carry no tokens."""

    persons: dict[PersonId, Person] = field(default_factory=dict)
    accounts: dict[AccountId, Account] = field(default_factory=dict)
    tokens: dict[AccountTokenId, AccountToken] = field(default_factory=dict)

    def snapshot(self) -> "InMemoryDatabase":
        """Copy the table dicts; rows are immutable, so this is enough."""
        return InMemoryDatabase(
            persons=dict(self.persons),
            accounts=dict(self.accounts),
            tokens=dict(self.tokens),
        )

    def restore(self, snapshot: "InMemoryDatabase") -> None:
        """Reset every table to a previous snapshot, in place."""
        self.persons = dict(snapshot.persons)
        self.accounts = dict(snapshot.accounts)
        self.tokens = dict(snapshot.tokens)

    def tokens_of(self, account_id: AccountId) -> list[AccountToken]:
        tokens = [t for t in self.tokens.values() if t.account_id == account_id]
        tokens.sort(key=lambda t: t.created_at)
        return tokens

    def load_account(self, account: Account) -> Account:
        """Attach the account's tokens, as the database finders do."""
        return account.model_copy(update={"tokens": self.tokens_of(account.id)})
