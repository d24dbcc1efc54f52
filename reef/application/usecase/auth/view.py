"""User view returned by the authentication use cases."""

from uuid import UUID

from pydantic import BaseModel

from reef.domain.model import Account


def _mask(secret: str | None) -> str | None:
    if secret is None:
        return None
    return secret[:4] + "*" * max(len(secret) - 4, 0)


class UserView(BaseModel):
    """Account as seen by its owner.

    Built from the account and its tokens only; the password hash is never
    read, so no password field can leak.
    """

    id: UUID
    username: str
    email: str
    token: str | None = None  # permanent token
    access_token: str | None = None  # OAuth access token
    refresh_token: str | None = None  # OAuth refresh token

    @classmethod
    def from_account(cls, account: Account) -> "UserView":
        """Build the view from a loaded account and its stored tokens."""
        permanent = account.permanent_token
        oauth = account.oauth_token
        return cls(
            id=account.id,
            username=account.username.root,
            email=account.email.root,
            token=permanent.token if permanent else None,
            access_token=oauth.token if oauth else None,
            refresh_token=oauth.refresh_token if oauth else None,
        )

    def censored(self) -> dict:
        """Attributes safe for logs: secrets keep only their first characters."""
        return {
            "id": str(self.id),
            "username": self.username,
            "email": self.email,
            "token": _mask(self.token),
            "access_token": _mask(self.access_token),
            "refresh_token": _mask(self.refresh_token),
        }
