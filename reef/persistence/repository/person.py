"""PostgreSQL implementation of Person repository."""

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from reef.domain.error import DuplicateUserError
from reef.domain.model import Person
from reef.domain.repository import PersonRepository
from reef.domain.value import PersonId, Slug
from reef.persistence.mappers import person_to_dict, row_to_person
from reef.persistence.tables import persons_table


class PostgresPersonRepository(PersonRepository):
    """PostgreSQL implementation of PersonRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, person_id: PersonId) -> Optional[Person]:
        """Find a person by ID."""
        stmt = select(persons_table).where(persons_table.c.id == person_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_person(dict(row)) if row else None

    async def find_by_slug(self, slug: Slug) -> Optional[Person]:
        """Find a person by slug."""
        stmt = select(persons_table).where(persons_table.c.slug == slug.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_person(dict(row)) if row else None

    async def save(self, person: Person) -> Person:
        """Save a person (create or update).

        Raises:
            DuplicateUserError: If the slug unique constraint rejects the write
        """
        existing = await self.find_by_id(person.id)
        person_dict = person_to_dict(person)

        if existing:
            stmt = (
                persons_table.update()
                .where(persons_table.c.id == person.id)
                .values(**person_dict)
            )
        else:
            stmt = persons_table.insert().values(**person_dict)

        try:
            await self.session.execute(stmt)
            await self.session.flush()
        except IntegrityError as e:
            raise DuplicateUserError("username", person.slug.root) from e
        return person

    async def count(self) -> int:
        """Count all persons."""
        result = await self.session.execute(
            select(func.count()).select_from(persons_table)
        )
        return result.scalar_one()
