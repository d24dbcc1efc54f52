"""Application layer DI providers."""

from dishka import Scope, provide

from reef.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
    UserInformationRefresher,
)
from reef.domain.repository import TransactionManager
from reef.domain.service import (
    AccountService,
    IdentityProvider,
    PasswordService,
    TokenService,
)
from reef.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_user_information_refresher(
        self, account_service: AccountService
    ) -> UserInformationRefresher:
        """Provide the post-call user information refresher."""
        return UserInformationRefresher(account_service=account_service)

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_register_use_case(
        self,
        account_service: AccountService,
        token_service: TokenService,
        password_service: PasswordService,
        identity_provider: IdentityProvider,
        transaction_manager: TransactionManager,
        refresher: UserInformationRefresher,
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(
            account_service=account_service,
            token_service=token_service,
            password_service=password_service,
            identity_provider=identity_provider,
            transaction_manager=transaction_manager,
            refresher=refresher,
        )

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self,
        account_service: AccountService,
        token_service: TokenService,
        password_service: PasswordService,
        identity_provider: IdentityProvider,
        transaction_manager: TransactionManager,
        refresher: UserInformationRefresher,
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(
            account_service=account_service,
            token_service=token_service,
            password_service=password_service,
            identity_provider=identity_provider,
            transaction_manager=transaction_manager,
            refresher=refresher,
        )

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, account_service: AccountService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(account_service=account_service)
