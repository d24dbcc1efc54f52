"""Domain layer DI providers."""

from dishka import Scope, provide

from reef.adapter.gitlab import GitlabIdentityProvider
from reef.config import AuthSettings
from reef.domain.repository import (
    AccountRepository,
    AccountTokenRepository,
    PersonRepository,
)
from reef.domain.service import (
    AccountService,
    IdentityProvider,
    PasswordService,
    TokenService,
)
from reef.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_identity_provider(self, gitlab: GitlabIdentityProvider) -> IdentityProvider:
        """Expose the Gitlab client under the domain contract."""
        return gitlab

    @provide
    def get_account_service(
        self,
        account_repository: AccountRepository,
        person_repository: PersonRepository,
    ) -> AccountService:
        """Provide account domain service."""
        return AccountService(
            account_repository=account_repository,
            person_repository=person_repository,
        )

    @provide
    def get_token_service(
        self,
        account_token_repository: AccountTokenRepository,
        auth_settings: AuthSettings,
    ) -> TokenService:
        """Provide account token domain service."""
        return TokenService(
            account_token_repository=account_token_repository,
            auth_settings=auth_settings,
        )

    @provide(scope=Scope.APP)
    def get_password_service(self, auth_settings: AuthSettings) -> PasswordService:
        """Provide password hashing domain service (stateless, shared)."""
        return PasswordService(auth_settings=auth_settings)
