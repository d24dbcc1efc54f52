"""Unit tests for TokenService."""

import pytest

from reef.domain.repository import (
    AccountRepository,
    AccountTokenRepository,
    PersonRepository,
)
from reef.domain.service import TokenService
from reef.domain.value import OAuthToken, TokenKind
from tests.factories import make_account, make_person
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def stored_account(unit_env):
    person_repo = await unit_env.get(PersonRepository)
    account_repo = await unit_env.get(AccountRepository)
    person = await person_repo.save(make_person())
    return await account_repo.save(make_account(person))


class TestTokenService:
    """Tests for TokenService."""

    @pytest.mark.asyncio
    async def test_issue_permanent_token(self, unit_env):
        """A first permanent token is created at generation 0."""
        # Arrange
        account = await stored_account(unit_env)
        token_service = await unit_env.get(TokenService)

        # Act
        token = await token_service.issue_permanent_token(account.id)

        # Assert
        assert token.kind == TokenKind.PERMANENT
        assert token.generation == 0
        assert len(token.token) >= 32

    @pytest.mark.asyncio
    async def test_reissue_replaces_in_place(self, unit_env):
        """Reissuing keeps the row, changes the secret and bumps generation."""
        # Arrange
        account = await stored_account(unit_env)
        token_service = await unit_env.get(TokenService)
        token_repo = await unit_env.get(AccountTokenRepository)
        first = await token_service.issue_permanent_token(account.id)

        # Act
        second = await token_service.issue_permanent_token(account.id)

        # Assert
        assert second.id == first.id
        assert second.token != first.token
        assert second.generation == 1
        assert await token_repo.count() == 1

    @pytest.mark.asyncio
    async def test_store_oauth_token(self, unit_env):
        """The provider pair is stored as the OAuth token."""
        # Arrange
        account = await stored_account(unit_env)
        token_service = await unit_env.get(TokenService)
        oauth_token = OAuthToken(
            access_token="accesstoken12345",
            refresh_token="refreshtoken1234567",
            token_type="bearer",
            scope="api",
            created_at=1585910424,
        )

        # Act
        token = await token_service.store_oauth_token(account.id, oauth_token)

        # Assert
        assert token.kind == TokenKind.OAUTH
        assert token.token == "accesstoken12345"
        assert token.refresh_token == "refreshtoken1234567"
        assert token.token_type == "bearer"
        assert token.scope == "api"
        assert int(token.issued_at.timestamp()) == 1585910424

    @pytest.mark.asyncio
    async def test_kinds_are_independent(self, unit_env):
        """Storing an OAuth token leaves the permanent token alone."""
        # Arrange
        account = await stored_account(unit_env)
        token_service = await unit_env.get(TokenService)
        permanent = await token_service.issue_permanent_token(account.id)

        # Act
        await token_service.store_oauth_token(
            account.id,
            OAuthToken(access_token="a", refresh_token="r", created_at=0),
        )

        # Assert
        token_repo = await unit_env.get(AccountTokenRepository)
        kept = await token_repo.find_by_account_and_kind(account.id, TokenKind.PERMANENT)
        assert kept == permanent
