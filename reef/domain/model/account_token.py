"""Account token entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from reef.domain.model.common import DomainModel
from reef.domain.value import AccountId, AccountTokenId, TokenKind


class AccountToken(DomainModel):
    """Secret credential attached to an account.

    Tokens are replaced in place per kind: a refresh overwrites the secret
    and bumps ``generation`` rather than appending a new row.
    """

    id: AccountTokenId
    account_id: AccountId
    token: str = Field(min_length=1)
    kind: TokenKind = TokenKind.PERMANENT
    generation: int = Field(default=0, ge=0)
    refresh_token: Optional[str] = None  # OAuth kind only
    token_type: Optional[str] = None
    scope: Optional[str] = None
    issued_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
