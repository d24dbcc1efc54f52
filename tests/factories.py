"""Builders for test data."""

from datetime import datetime, timezone
from uuid import uuid4

from reef.application.usecase.auth import LoginRequest, RegisterRequest
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

PASSWORD = "a password"


def make_register_request(
    username: str = "username",
    email: str = "email@example.org",
    password: str = PASSWORD,
    name: str = "name",
) -> RegisterRequest:
    """Registration request with valid defaults."""
    return RegisterRequest(username=username, email=email, password=password, name=name)


def make_login_request(
    username: str | None = "username",
    email: str | None = None,
    password: str = PASSWORD,
) -> LoginRequest:
    """Login request with valid defaults."""
    return LoginRequest(username=username, email=email, password=password)


def make_person(slug: str = "alice", name: str = "Alice") -> Person:
    """Person row."""
    return Person(
        id=PersonId(uuid4()),
        slug=Slug(slug),
        name=name,
        created_at=datetime.now(timezone.utc),
        updated_at=datetime.now(timezone.utc),
    )


def make_account(
    person: Person,
    username: str = "alice",
    email: str = "alice@example.org",
    password_hash: str = "not-a-real-hash",
) -> Account:
    """Account row owned by ``person``."""
    return Account(
        id=AccountId(uuid4()),
        username=Username(username),
        email=Email(email),
        password_hash=password_hash,
        person_id=person.id,
        created_at=datetime.now(timezone.utc),
        updated_at=datetime.now(timezone.utc),
    )


def make_token(
    account: Account,
    token: str = "secret-token",
    kind: TokenKind = TokenKind.PERMANENT,
) -> AccountToken:
    """Token row owned by ``account``."""
    return AccountToken(
        id=AccountTokenId(uuid4()),
        account_id=account.id,
        token=token,
        kind=kind,
        generation=0,
        created_at=datetime.now(timezone.utc),
        updated_at=datetime.now(timezone.utc),
    )
