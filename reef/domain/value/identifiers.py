"""Strongly typed identifiers for Reef domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

PersonId = NewType("PersonId", UUID)
AccountId = NewType("AccountId", UUID)
AccountTokenId = NewType("AccountTokenId", UUID)
