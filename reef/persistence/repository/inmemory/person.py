"""In-memory person repository for testing."""

from typing import Optional

from reef.domain.error import DuplicateUserError
from reef.domain.model import Person
from reef.domain.repository import PersonRepository
from reef.domain.value import PersonId, Slug

from .database import InMemoryDatabase


class InMemoryPersonRepository(PersonRepository):
    """In-memory implementation of PersonRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self._db = database or InMemoryDatabase()

    async def find_by_id(self, person_id: PersonId) -> Optional[Person]:
        """Find a person by ID."""
        return self._db.persons.get(person_id)

    async def find_by_slug(self, slug: Slug) -> Optional[Person]:
        """Find a person by slug."""
        for person in self._db.persons.values():
            if person.slug == slug:
                return person
        return None

    async def save(self, person: Person) -> Person:
        """Save or update a person, enforcing slug uniqueness."""
        for other in self._db.persons.values():
            if other.id != person.id and other.slug == person.slug:
                raise DuplicateUserError("username", person.slug.root)
        self._db.persons[person.id] = person
        return person

    async def count(self) -> int:
        """Count all persons."""
        return len(self._db.persons)
