"""Unit tests for AccountService."""

from uuid import uuid4

import pytest

from reef.domain.error import DuplicateUserError, UserNotFoundError
from reef.domain.repository import (
    AccountRepository,
    AccountTokenRepository,
    PersonRepository,
)
from reef.domain.service import AccountService
from reef.domain.value import AccountId, Email, TokenKind, Username
from tests.factories import make_account, make_person, make_token
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def create_alice(account_service: AccountService):
    person = make_person(slug="alice")
    account = make_account(person, username="alice", email="alice@example.org")
    await account_service.create(person, account)
    return person, account


class TestAccountService:
    """Tests for AccountService."""

    @pytest.mark.asyncio
    async def test_get_by_id_missing(self, unit_env):
        """An unknown id raises UserNotFoundError."""
        account_service = await unit_env.get(AccountService)

        with pytest.raises(UserNotFoundError):
            await account_service.get_by_id(AccountId(uuid4()))

    @pytest.mark.asyncio
    async def test_resolve_prefers_username(self, unit_env):
        """With both identifiers, the username decides."""
        # Arrange
        account_service = await unit_env.get(AccountService)
        _, alice = await create_alice(account_service)
        bob_person = make_person(slug="bob")
        bob = make_account(bob_person, username="bob", email="bob@example.org")
        await account_service.create(bob_person, bob)

        # Act
        resolved = await account_service.resolve(Username("alice"), Email("bob@example.org"))

        # Assert
        assert resolved.id == alice.id

    @pytest.mark.asyncio
    async def test_resolve_unknown(self, unit_env):
        """Neither identifier matching raises UserNotFoundError."""
        account_service = await unit_env.get(AccountService)

        with pytest.raises(UserNotFoundError):
            await account_service.resolve(Username("nobody"), Email("nobody@example.org"))

    @pytest.mark.asyncio
    async def test_ensure_available(self, unit_env):
        """Taken usernames and emails are reported with the offending field."""
        # Arrange
        account_service = await unit_env.get(AccountService)
        await create_alice(account_service)

        # Act & Assert
        with pytest.raises(DuplicateUserError) as exc_info:
            await account_service.ensure_available(Username("alice"), Email("x@example.org"))
        assert exc_info.value.field == "username"

        with pytest.raises(DuplicateUserError) as exc_info:
            await account_service.ensure_available(Username("carol"), Email("ALICE@example.org"))
        assert exc_info.value.field == "email"

        await account_service.ensure_available(Username("carol"), Email("carol@example.org"))

    @pytest.mark.asyncio
    async def test_ensure_available_checks_person_slug(self, unit_env):
        """A username whose slug collides with an existing person is taken."""
        # Arrange
        account_service = await unit_env.get(AccountService)
        await create_alice(account_service)

        # Act & Assert
        with pytest.raises(DuplicateUserError):
            await account_service.ensure_available(Username("Alice"), Email("a2@example.org"))

    @pytest.mark.asyncio
    async def test_link_gitlab_identity(self, unit_env):
        """Linking stores the provider user id on the person."""
        # Arrange
        account_service = await unit_env.get(AccountService)
        _, alice = await create_alice(account_service)

        # Act
        person = await account_service.link_gitlab_identity(alice, 42)

        # Assert
        assert person.gitlab_id == 42

    @pytest.mark.asyncio
    async def test_get_account_by_token(self, unit_env):
        """A stored token resolves to its account with tokens loaded."""
        # Arrange
        account_service = await unit_env.get(AccountService)
        token_repo = await unit_env.get(AccountTokenRepository)
        _, alice = await create_alice(account_service)
        await token_repo.save(make_token(alice, token="alice-secret"))

        # Act
        found = await account_service.get_account_by_token("alice-secret")

        # Assert
        assert found.id == alice.id
        assert found.token_of_kind(TokenKind.PERMANENT).token == "alice-secret"
        assert await account_service.get_account_by_token("unknown") is None

    @pytest.mark.asyncio
    async def test_record_login(self, unit_env):
        """Recording a login sets last_login_at."""
        # Arrange
        account_service = await unit_env.get(AccountService)
        _, alice = await create_alice(account_service)

        # Act
        updated = await account_service.record_login(alice)

        # Assert
        assert updated.last_login_at is not None
        stored = await account_service.get_by_id(alice.id)
        assert stored.last_login_at == updated.last_login_at

    @pytest.mark.asyncio
    async def test_token_lookup_goes_through_accounts(self, unit_env):
        """Token lookup needs only the account and person repositories."""
        # Arrange
        account_service = AccountService(
            account_repository=await unit_env.get(AccountRepository),
            person_repository=await unit_env.get(PersonRepository),
        )
        token_repo = await unit_env.get(AccountTokenRepository)
        _, alice = await create_alice(account_service)
        await token_repo.save(make_token(alice, token="alice-secret"))

        # Act
        found = await account_service.get_account_by_token("alice-secret")

        # Assert
        assert found.id == alice.id
