"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import and_, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from roster.domain.model import User
from roster.domain.repository import UserRepository
from roster.domain.value import (
    EmailAddress,
    OrganizationId,
    UserId,
    Username,
    UserRole,
    UserStatus,
)
from roster.persistence.errors import translate_errors
from roster.persistence.mappers import row_to_user, user_to_dict
from roster.persistence.tables import users_table

ADMINISTRATOR_ROLES = [role.value for role in UserRole if role.is_administrator]


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _find_one(self, *conditions) -> Optional[User]:
        stmt = select(users_table).where(and_(*conditions))
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    @translate_errors
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return await self._find_one(users_table.c.id == user_id)

    @translate_errors
    async def find_by_username(self, username: Username) -> Optional[User]:
        return await self._find_one(users_table.c.username == username.root)

    @translate_errors
    async def find_by_email_in_organization(
        self, email: EmailAddress, organization_id: OrganizationId
    ) -> Optional[User]:
        return await self._find_one(
            users_table.c.email == email.root,
            users_table.c.organization_id == organization_id,
        )

    @translate_errors
    async def find_by_organization(self, organization_id: OrganizationId) -> list[User]:
        stmt = (
            select(users_table)
            .where(users_table.c.organization_id == organization_id)
            .order_by(users_table.c.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    @translate_errors
    async def count_admins(self, organization_id: OrganizationId) -> int:
        """Count ACTIVE users holding ADMIN or UNPAID_ADMIN."""
        stmt = (
            select(func.count())
            .select_from(users_table)
            .where(
                and_(
                    users_table.c.organization_id == organization_id,
                    users_table.c.role.in_(ADMINISTRATOR_ROLES),
                    users_table.c.status == UserStatus.ACTIVE.value,
                )
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    @translate_errors
    async def save(self, user: User) -> User:
        values = user_to_dict(user)

        existing = await self.find_by_id(user.id)
        if existing:
            stmt = (
                update(users_table)
                .where(users_table.c.id == user.id)
                .values(**values)
            )
        else:
            stmt = insert(users_table).values(**values)
        await self.session.execute(stmt)
        await self.session.flush()
        return user

    @translate_errors
    async def delete(self, user_id: UserId) -> None:
        stmt = delete(users_table).where(users_table.c.id == user_id)
        await self.session.execute(stmt)
        await self.session.flush()
