"""Person entity.

The public profile behind an account; one person per account.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from reef.domain.model.common import DomainModel
from reef.domain.value import PersonId, Slug


class Person(DomainModel):
    """Person owning exactly one account.

    ``gitlab_id`` is the numeric user id of the companion identity on the
    identity provider; it is set once provisioning succeeded.
    """

    id: PersonId
    slug: Slug
    name: str = Field(min_length=1, max_length=255)
    gitlab_id: Optional[int] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
