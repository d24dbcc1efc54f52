"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Iterable
from uuid import UUID

from reef.domain.model import Account, AccountToken, Person
from reef.domain.value import (
    AccountId,
    AccountTokenId,
    Email,
    PersonId,
    Slug,
    TokenKind,
    Username,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_person(row: Dict[str, Any]) -> Person:
    """Convert database row to Person domain model.

    Args:
        row: Database row as dict

    Returns:
        Person domain model
    """
    return Person(
        id=PersonId(_uuid(row["id"])),
        slug=Slug(row["slug"]),
        name=row["name"],
        gitlab_id=row.get("gitlab_id"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def person_to_dict(person: Person) -> Dict[str, Any]:
    """Convert Person domain model to database dict."""
    return person.model_dump()


def row_to_account_token(row: Dict[str, Any]) -> AccountToken:
    """Convert database row to AccountToken domain model.

    Args:
        row: Database row as dict

    Returns:
        AccountToken domain model
    """
    return AccountToken(
        id=AccountTokenId(_uuid(row["id"])),
        account_id=AccountId(_uuid(row["account_id"])),
        token=row["token"],
        kind=TokenKind(row["kind"]),
        generation=row["generation"],
        refresh_token=row.get("refresh_token"),
        token_type=row.get("token_type"),
        scope=row.get("scope"),
        issued_at=row.get("issued_at"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def account_token_to_dict(token: AccountToken) -> Dict[str, Any]:
    """Convert AccountToken domain model to database dict."""
    data = token.model_dump()
    data["kind"] = token.kind.value
    return data


def row_to_account(
    row: Dict[str, Any], tokens: Iterable[AccountToken] = ()
) -> Account:
    """Convert database row to Account domain model.

    Args:
        row: Database row as dict
        tokens: The account's tokens, already mapped

    Returns:
        Account domain model
    """
    return Account(
        id=AccountId(_uuid(row["id"])),
        username=Username(row["username"]),
        email=Email(row["email"]),
        password_hash=row["password_hash"],
        person_id=PersonId(_uuid(row["person_id"])),
        tokens=sorted(tokens, key=lambda t: t.created_at),
        last_login_at=row.get("last_login_at"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def account_to_dict(account: Account) -> Dict[str, Any]:
    """Convert Account domain model to database dict.

    Tokens live in their own table and are left out.
    """
    return account.model_dump(exclude={"tokens"})
