"""PostgreSQL implementation of Organization repository."""

from typing import Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from roster.domain.model import Organization
from roster.domain.repository import OrganizationRepository
from roster.domain.value import OrganizationId
from roster.persistence.errors import translate_errors
from roster.persistence.mappers import organization_to_dict, row_to_organization
from roster.persistence.tables import organizations_table


class PostgresOrganizationRepository(OrganizationRepository):
    """PostgreSQL implementation of OrganizationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @translate_errors
    async def find_by_id(
        self, organization_id: OrganizationId
    ) -> Optional[Organization]:
        stmt = select(organizations_table).where(
            organizations_table.c.id == organization_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_organization(dict(row)) if row else None

    @translate_errors
    async def find_by_name(self, name: str) -> Optional[Organization]:
        stmt = select(organizations_table).where(organizations_table.c.name == name)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_organization(dict(row)) if row else None

    @translate_errors
    async def save(self, organization: Organization) -> Organization:
        values = organization_to_dict(organization)

        existing = await self.find_by_id(organization.id)
        if existing:
            stmt = (
                update(organizations_table)
                .where(organizations_table.c.id == organization.id)
                .values(**values)
            )
        else:
            stmt = insert(organizations_table).values(**values)
        await self.session.execute(stmt)
        await self.session.flush()
        return organization

    @translate_errors
    async def lock(self, organization_id: OrganizationId) -> None:
        """Take a row lock on the organization (SELECT ... FOR UPDATE).

        The lock lives until the enclosing database transaction ends.
        """
        stmt = (
            select(organizations_table.c.id)
            .where(organizations_table.c.id == organization_id)
            .with_for_update()
        )
        await self.session.execute(stmt)
