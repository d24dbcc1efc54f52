"""Account domain service."""

from datetime import datetime, timezone

import logfire

from reef.domain.error import DuplicateUserError, UserNotFoundError
from reef.domain.model import Account, Person
from reef.domain.repository import AccountRepository, PersonRepository
from reef.domain.value import AccountId, Email, Slug, Username

from .base import Service


class AccountService(Service):
    """Domain service for account and person operations."""

    def __init__(
        self,
        account_repository: AccountRepository,
        person_repository: PersonRepository,
    ) -> None:
        """Initialize account service.

        Args:
            account_repository: Account repository
            person_repository: Person repository
        """
        self.account_repository = account_repository
        self.person_repository = person_repository

    async def get_by_id(self, account_id: AccountId) -> Account:
        """Get account by ID.

        Raises:
            UserNotFoundError: If account not found
        """
        with logfire.span("account_service.get_by_id", account_id=str(account_id)):
            account = await self.account_repository.find_by_id(account_id)
            if not account:
                logfire.warn("Account not found", account_id=str(account_id))
                raise UserNotFoundError(str(account_id))
            return account

    async def get_account_by_username(self, username: Username) -> Account | None:
        """Get account by username.

        Args:
            username: Account username

        Returns:
            Account if found, None otherwise
        """
        with logfire.span("account_service.get_account_by_username", username=username.root):
            account = await self.account_repository.find_by_username(username)
            if account:
                logfire.info("Account found", username=username.root, account_id=str(account.id))
            else:
                logfire.warn("Account not found", username=username.root)
            return account

    async def get_account_by_email(self, email: Email) -> Account | None:
        """Get account by email.

        Args:
            email: Account email

        Returns:
            Account if found, None otherwise
        """
        with logfire.span("account_service.get_account_by_email", email=email.root):
            account = await self.account_repository.find_by_email(email)
            if account:
                logfire.info("Account found", email=email.root, account_id=str(account.id))
            else:
                logfire.warn("Account not found", email=email.root)
            return account

    async def resolve(
        self, username: Username | None, email: Email | None
    ) -> Account:
        """Resolve the account a login refers to.

        The username wins when both are given; the email is only consulted
        when no account has that username.

        Raises:
            UserNotFoundError: If neither identifier matches an account
        """
        account = None
        if username is not None:
            account = await self.get_account_by_username(username)
        if account is None and email is not None:
            account = await self.get_account_by_email(email)
        if account is None:
            raise UserNotFoundError(str(username if username is not None else email))
        return account

    async def get_account_by_token(self, token: str) -> Account | None:
        """Get the account owning a token secret."""
        with logfire.span("account_service.get_account_by_token"):
            account = await self.account_repository.find_by_token(token)
            if not account:
                logfire.warn("No account for token")
            return account

    async def ensure_available(self, username: Username, email: Email) -> None:
        """Check that a registration would not collide with an existing user.

        Raises:
            DuplicateUserError: If username, email or the derived person slug is taken
        """
        with logfire.span(
            "account_service.ensure_available", username=username.root, email=email.root
        ):
            if await self.account_repository.find_by_username(username):
                logfire.warn("Username taken", username=username.root)
                raise DuplicateUserError("username", username.root)
            if await self.account_repository.find_by_email(email):
                logfire.warn("Email taken", email=email.root)
                raise DuplicateUserError("email", email.root)
            if await self.person_repository.find_by_slug(Slug.from_username(username)):
                logfire.warn("Person slug taken", username=username.root)
                raise DuplicateUserError("username", username.root)

    async def create(self, person: Person, account: Account) -> Account:
        """Persist a new person and its account.

        Call inside ``TransactionManager.atomic()`` so both rows land together.

        Args:
            person: Person owning the account
            account: New account referencing ``person``

        Returns:
            Saved account
        """
        with logfire.span(
            "account_service.create",
            account_id=str(account.id),
            person_id=str(person.id),
            username=account.username.root,
        ):
            await self.person_repository.save(person)
            saved = await self.account_repository.save(account)
            logfire.info(
                "Account created",
                account_id=str(saved.id),
                username=saved.username.root,
            )
            return saved

    async def link_gitlab_identity(self, account: Account, gitlab_user_id: int) -> Person:
        """Record the provider-side user id on the account's person.

        Raises:
            UserNotFoundError: If the person does not exist
        """
        with logfire.span(
            "account_service.link_gitlab_identity",
            account_id=str(account.id),
            gitlab_user_id=gitlab_user_id,
        ):
            person = await self.person_repository.find_by_id(account.person_id)
            if not person:
                raise UserNotFoundError(str(account.person_id))
            updated = person.model_copy(
                update={
                    "gitlab_id": gitlab_user_id,
                    "updated_at": datetime.now(timezone.utc),
                }
            )
            return await self.person_repository.save(updated)

    async def record_login(self, account: Account) -> Account:
        """Stamp ``last_login_at`` on the account."""
        with logfire.span("account_service.record_login", account_id=str(account.id)):
            now = datetime.now(timezone.utc)
            updated = account.model_copy(update={"last_login_at": now, "updated_at": now})
            return await self.account_repository.save(updated)
