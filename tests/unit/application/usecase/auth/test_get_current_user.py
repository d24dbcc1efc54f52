"""Unit tests for GetCurrentUserUseCase."""

import pytest

from reef.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    RegisterUseCase,
)
from reef.domain.error import IncorrectCredentialsError
from tests.factories import make_register_request
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetCurrentUserUseCase:
    """Tests for GetCurrentUserUseCase."""

    @pytest.mark.asyncio
    async def test_resolves_permanent_token(self, unit_env):
        """The permanent token should resolve to its account."""
        # Arrange
        register = await unit_env.get(RegisterUseCase)
        registered = await register.execute(make_register_request())
        use_case = await unit_env.get(GetCurrentUserUseCase)

        # Act
        view = await use_case.execute(GetCurrentUserRequest(token=registered.token))

        # Assert
        assert view == registered

    @pytest.mark.asyncio
    async def test_resolves_oauth_access_token(self, unit_env):
        """The stored Gitlab access token is accepted as well."""
        # Arrange
        register = await unit_env.get(RegisterUseCase)
        registered = await register.execute(make_register_request())
        use_case = await unit_env.get(GetCurrentUserUseCase)

        # Act
        view = await use_case.execute(
            GetCurrentUserRequest(token=registered.access_token)
        )

        # Assert
        assert view.id == registered.id

    @pytest.mark.asyncio
    async def test_unknown_token(self, unit_env):
        """An unknown token should raise IncorrectCredentialsError."""
        # Arrange
        use_case = await unit_env.get(GetCurrentUserUseCase)

        # Act & Assert
        with pytest.raises(IncorrectCredentialsError):
            await use_case.execute(GetCurrentUserRequest(token="not-a-token"))

    @pytest.mark.asyncio
    async def test_empty_token(self, unit_env):
        """An empty token should raise IncorrectCredentialsError."""
        # Arrange
        use_case = await unit_env.get(GetCurrentUserUseCase)

        # Act & Assert
        with pytest.raises(IncorrectCredentialsError):
            await use_case.execute(GetCurrentUserRequest(token=""))
