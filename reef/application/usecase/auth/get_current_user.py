"""Get current user use case."""

from pydantic import BaseModel

from reef.application.usecase.base import BaseUseCase
from reef.domain.error import IncorrectCredentialsError
from reef.domain.service import AccountService

from .view import UserView


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # any stored token of the account: permanent or OAuth access token


class GetCurrentUserUseCase(BaseUseCase):
    """Use case for resolving the account behind an API token."""

    def __init__(self, account_service: AccountService) -> None:
        """Initialize get current user use case.

        Args:
            account_service: Account domain service
        """
        self.account_service = account_service

    async def execute(self, request: GetCurrentUserRequest) -> UserView:
        """Look up the account owning ``request.token``.

        Raises:
            IncorrectCredentialsError: If the token is empty or unknown
        """
        if not request.token:
            raise IncorrectCredentialsError("Missing token")

        account = await self.account_service.get_account_by_token(request.token)
        if not account:
            raise IncorrectCredentialsError("Invalid token")

        return UserView.from_account(account)
