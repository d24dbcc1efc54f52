"""Register use case."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire
from pydantic import BaseModel

from reef.application.usecase.base import BaseUseCase
from reef.domain.error import ValidationFailedError
from reef.domain.model import Account, Person
from reef.domain.repository import TransactionManager
from reef.domain.service import (
    AccountService,
    IdentityProvider,
    PasswordService,
    TokenService,
)
from reef.domain.value import AccountId, Email, PersonId, Slug, Username

from .refresh import RefreshField, UserInformationRefresher, refresh_user_information
from .view import UserView


class RegisterRequest(BaseModel):
    """Registration request.

    Fields are plain strings so malformed input reaches the use case and is
    reported as a ``ValidationFailed`` error, not a schema error.
    """

    username: str
    email: str
    password: str
    name: str


class RegisterUseCase(BaseUseCase):
    """Use case for creating an account together with its Gitlab identity."""

    def __init__(
        self,
        account_service: AccountService,
        token_service: TokenService,
        password_service: PasswordService,
        identity_provider: IdentityProvider,
        transaction_manager: TransactionManager,
        refresher: UserInformationRefresher,
    ) -> None:
        """Initialize register use case.

        Args:
            account_service: Account domain service
            token_service: Account token domain service
            password_service: Password hashing domain service
            identity_provider: Gitlab identity provider
            transaction_manager: Unit of work for the provisioning steps
            refresher: Re-reads the stored account after registration
        """
        self.account_service = account_service
        self.token_service = token_service
        self.password_service = password_service
        self.identity_provider = identity_provider
        self.transaction_manager = transaction_manager
        self.refresher = refresher

    @refresh_user_information(RefreshField.PROFILE, RefreshField.TOKENS)
    async def execute(self, request: RegisterRequest) -> UserView:
        """Execute registration flow.

        Steps:
        1. Validate input and check username and email are free
        2. Create person and account with the hashed password
        3. Provision the Gitlab user and obtain its OAuth token pair
        4. Link the Gitlab user id, issue the permanent token, store the pair

        Steps 2-4 run in one atomic block: if any of them fails, nothing
        of the registration is kept.

        Args:
            request: Registration data

        Returns:
            View of the new account with its permanent and OAuth tokens

        Raises:
            ValidationFailedError: If a field is missing or malformed
            DuplicateUserError: If username or email is taken
            AuthenticationFailedError: If Gitlab refused provisioning
        """
        username = self.parse(Username, request.username, "username")
        email = self.parse(Email, request.email, "email")
        self.password_service.check_policy(request.password)
        name = request.name.strip()
        if not name:
            raise ValidationFailedError("Name must not be empty")
        if len(name) > 255:
            raise ValidationFailedError("Name must be at most 255 characters")

        await self.account_service.ensure_available(username, email)

        now = datetime.now(timezone.utc)
        person = Person(
            id=PersonId(uuid4()),
            slug=Slug.from_username(username),
            name=name,
            created_at=now,
            updated_at=now,
        )
        account = Account(
            id=AccountId(uuid4()),
            username=username,
            email=email,
            password_hash=self.password_service.hash(request.password),
            person_id=person.id,
            created_at=now,
            updated_at=now,
        )

        with logfire.span(
            "register_account",
            username=username.root,
            account_id=str(account.id),
        ):
            async with self.transaction_manager.atomic():
                await self.account_service.create(person, account)

                provisioned = await self.identity_provider.provision(
                    username.root, email.root, request.password, name
                )
                await self.account_service.link_gitlab_identity(
                    account, provisioned.gitlab_user_id
                )

                permanent = await self.token_service.issue_permanent_token(account.id)
                oauth = await self.token_service.store_oauth_token(
                    account.id, provisioned.token
                )

            view = UserView(
                id=account.id,
                username=username.root,
                email=email.root,
                token=permanent.token,
                access_token=oauth.token,
                refresh_token=oauth.refresh_token,
            )
            logfire.info("Account registered", **view.censored())
            return view
