"""Login use case."""

import logfire
from pydantic import BaseModel

from reef.application.usecase.base import BaseUseCase
from reef.domain.error import IncorrectCredentialsError, ValidationFailedError
from reef.domain.repository import TransactionManager
from reef.domain.service import (
    AccountService,
    IdentityProvider,
    PasswordService,
    TokenService,
)
from reef.domain.value import Email, Username

from .refresh import RefreshField, UserInformationRefresher, refresh_user_information
from .view import UserView


class LoginRequest(BaseModel):
    """Login request.

    At least one of ``username`` and ``email`` must be given.
    """

    password: str
    username: str | None = None
    email: str | None = None


class LoginUseCase(BaseUseCase):
    """Use case for password login against the local store and Gitlab."""

    def __init__(
        self,
        account_service: AccountService,
        token_service: TokenService,
        password_service: PasswordService,
        identity_provider: IdentityProvider,
        transaction_manager: TransactionManager,
        refresher: UserInformationRefresher,
    ) -> None:
        """Initialize login use case.

        Args:
            account_service: Account domain service
            token_service: Account token domain service
            password_service: Password hashing domain service
            identity_provider: Gitlab identity provider
            transaction_manager: Unit of work for the token update
            refresher: Re-reads the stored tokens after login
        """
        self.account_service = account_service
        self.token_service = token_service
        self.password_service = password_service
        self.identity_provider = identity_provider
        self.transaction_manager = transaction_manager
        self.refresher = refresher

    @refresh_user_information(RefreshField.TOKENS)
    async def execute(self, request: LoginRequest) -> UserView:
        """Execute login flow.

        Steps:
        1. Resolve the account by username, falling back to email
        2. Verify the password against the stored hash
        3. Authenticate with Gitlab and obtain a fresh OAuth token pair
        4. Replace the stored OAuth token and stamp ``last_login_at``

        Args:
            request: Login credentials

        Returns:
            View of the account with its permanent token and the fresh pair

        Raises:
            ValidationFailedError: If the password or both identifiers are missing
            UserNotFoundError: If no account matches
            IncorrectCredentialsError: If the password does not match
            AuthenticationFailedError: If Gitlab rejected the credentials
        """
        if not request.password:
            raise ValidationFailedError("Password must not be empty")
        if not request.username and not request.email:
            raise ValidationFailedError("Either username or email is required")

        username = (
            self.parse(Username, request.username, "username") if request.username else None
        )
        email = self.parse(Email, request.email, "email") if request.email else None

        account = await self.account_service.resolve(username, email)

        with logfire.span(
            "login_account",
            username=account.username.root,
            account_id=str(account.id),
        ):
            if not self.password_service.verify(request.password, account.password_hash):
                logfire.warn("Password mismatch", account_id=str(account.id))
                raise IncorrectCredentialsError()

            oauth_token = await self.identity_provider.login(
                account.username.root, request.password
            )

            async with self.transaction_manager.atomic():
                await self.account_service.record_login(account)
                oauth = await self.token_service.store_oauth_token(account.id, oauth_token)

            permanent = account.permanent_token
            view = UserView(
                id=account.id,
                username=account.username.root,
                email=account.email.root,
                token=permanent.token if permanent else None,
                access_token=oauth.token,
                refresh_token=oauth.refresh_token,
            )
            logfire.info("Account logged in", **view.censored())
            return view
