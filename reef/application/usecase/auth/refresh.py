"""Post-call refresh of user information.

Use cases that change an account declare which parts of the returned view
must be re-read from the store once they are done:

    class LoginUseCase:
        @refresh_user_information(RefreshField.TOKENS)
        async def execute(self, request: LoginRequest) -> UserView:
            ...

The decorated method's instance must expose a ``refresher`` attribute.
"""

import functools
from enum import Enum
from typing import Awaitable, Callable

import logfire

from reef.domain.service import AccountService
from reef.domain.value import AccountId

from .view import UserView


class RefreshField(str, Enum):
    """Parts of a ``UserView`` that can be refreshed."""

    PROFILE = "profile"  # username, email
    TOKENS = "tokens"  # permanent, access and refresh tokens


class UserInformationRefresher:
    """Re-reads an account and rewrites selected fields of a view."""

    def __init__(self, account_service: AccountService) -> None:
        """Initialize refresher.

        Args:
            account_service: Account domain service
        """
        self.account_service = account_service

    async def refresh(self, view: UserView, fields: frozenset[RefreshField]) -> UserView:
        """Return ``view`` with ``fields`` taken from the stored account.

        Raises:
            UserNotFoundError: If the account vanished
        """
        if not fields:
            return view

        with logfire.span(
            "user_information_refresher.refresh",
            account_id=str(view.id),
            fields=sorted(f.value for f in fields),
        ):
            account = await self.account_service.get_by_id(AccountId(view.id))
            stored = UserView.from_account(account)

            updates: dict = {}
            if RefreshField.PROFILE in fields:
                updates["username"] = stored.username
                updates["email"] = stored.email
            if RefreshField.TOKENS in fields:
                updates["token"] = stored.token
                updates["access_token"] = stored.access_token
                updates["refresh_token"] = stored.refresh_token

            return view.model_copy(update=updates)


def refresh_user_information(*fields: RefreshField):
    """Refresh ``fields`` of the returned view after the decorated call."""
    wanted = frozenset(fields)

    def decorator(
        execute: Callable[..., Awaitable[UserView]],
    ) -> Callable[..., Awaitable[UserView]]:
        @functools.wraps(execute)
        async def wrapper(self, *args, **kwargs) -> UserView:
            view = await execute(self, *args, **kwargs)
            return await self.refresher.refresh(view, wanted)

        return wrapper

    return decorator
