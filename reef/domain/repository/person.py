"""Person repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from reef.domain.model.person import Person
from reef.domain.value import PersonId, Slug


class PersonRepository(ABC):
    """Repository for Person entity."""

    @abstractmethod
    async def find_by_id(self, person_id: PersonId) -> Optional[Person]:
        """Find a person by ID.

        Args:
            person_id: The person's unique identifier

        Returns:
            The person if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> Optional[Person]:
        """Find a person by slug.

        Args:
            slug: The person's URL slug

        Returns:
            The person if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, person: Person) -> Person:
        """Save a person (create or update).

        Args:
            person: The person to save

        Returns:
            The saved person

        Raises:
            DuplicateUserError: If the slug belongs to another person
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all persons."""
        pass
