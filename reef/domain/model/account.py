"""Account aggregate root.

Accounts are created once at registration and authenticate locally
(password hash) and against the Gitlab identity provider.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from reef.domain.model.account_token import AccountToken
from reef.domain.model.common import DomainModel
from reef.domain.value import AccountId, Email, PersonId, TokenKind, Username


class Account(DomainModel):
    """Account aggregate root.

    ``tokens`` is populated by repositories on read and ordered by creation
    time; it is not written through ``AccountRepository.save``.
    """

    id: AccountId
    username: Username
    email: Email
    password_hash: str = Field(repr=False)
    person_id: PersonId
    tokens: list[AccountToken] = Field(default_factory=list)
    last_login_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def token_of_kind(self, kind: TokenKind) -> Optional[AccountToken]:
        """Return the account's token of the given kind, if any."""
        for token in self.tokens:
            if token.kind == kind:
                return token
        return None

    @property
    def permanent_token(self) -> Optional[AccountToken]:
        return self.token_of_kind(TokenKind.PERMANENT)

    @property
    def oauth_token(self) -> Optional[AccountToken]:
        return self.token_of_kind(TokenKind.OAUTH)
