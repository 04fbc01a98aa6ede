"""PostgreSQL implementation of Invitation repository."""

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import and_, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from roster.domain.model import Invitation
from roster.domain.repository import InvitationRepository
from roster.domain.value import (
    EmailAddress,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    OrganizationId,
    UserId,
)
from roster.persistence.errors import translate_errors
from roster.persistence.mappers import invitation_to_dict, row_to_invitation
from roster.persistence.tables import invitations_table


class PostgresInvitationRepository(InvitationRepository):
    """PostgreSQL implementation of InvitationRepository.

    Status transitions are conditional UPDATEs, so a transition only lands
    if the row still holds the status the caller observed.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @translate_errors
    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        stmt = select(invitations_table).where(invitations_table.c.id == invitation_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    @translate_errors
    async def find_by_token(self, token: InvitationToken) -> Optional[Invitation]:
        stmt = select(invitations_table).where(invitations_table.c.token == token.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    @translate_errors
    async def find_pending_by_email(
        self, email: EmailAddress, organization_id: OrganizationId
    ) -> Optional[Invitation]:
        stmt = select(invitations_table).where(
            and_(
                invitations_table.c.email == email.root,
                invitations_table.c.organization_id == organization_id,
                invitations_table.c.status == InvitationStatus.PENDING.value,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    @translate_errors
    async def find_by_organization(
        self,
        organization_id: OrganizationId,
        status: Optional[InvitationStatus] = None,
    ) -> list[Invitation]:
        stmt = (
            select(invitations_table)
            .where(invitations_table.c.organization_id == organization_id)
            .order_by(invitations_table.c.created_at.desc())
        )
        if status:
            stmt = stmt.where(invitations_table.c.status == status.value)

        result = await self.session.execute(stmt)
        return [row_to_invitation(dict(row)) for row in result.mappings().all()]

    @translate_errors
    async def find_expired_pending(self, now: datetime) -> list[Invitation]:
        stmt = (
            select(invitations_table)
            .where(
                and_(
                    invitations_table.c.status == InvitationStatus.PENDING.value,
                    invitations_table.c.expires_at < now,
                )
            )
            .order_by(invitations_table.c.expires_at.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_invitation(dict(row)) for row in result.mappings().all()]

    @translate_errors
    async def save(self, invitation: Invitation) -> Invitation:
        """Insert a new invitation.

        The partial unique index on (email, organization_id) WHERE
        status = 'pending' rejects a second pending invitation.
        """
        stmt = insert(invitations_table).values(**invitation_to_dict(invitation))
        await self.session.execute(stmt)
        await self.session.flush()
        return invitation

    @translate_errors
    async def transition_status(
        self,
        invitation_id: InvitationId,
        expected: InvitationStatus,
        new: InvitationStatus,
        accepted_at: Optional[datetime] = None,
    ) -> Optional[Invitation]:
        values: dict[str, Any] = {"status": new.value}
        if accepted_at is not None:
            values["accepted_at"] = accepted_at

        stmt = (
            update(invitations_table)
            .where(
                and_(
                    invitations_table.c.id == invitation_id,
                    invitations_table.c.status == expected.value,
                )
            )
            .values(**values)
            .returning(invitations_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    @translate_errors
    async def detach_inviter(self, user_id: UserId) -> int:
        stmt = (
            update(invitations_table)
            .where(invitations_table.c.invited_by_id == user_id)
            .values(invited_by_id=None)
        )
        result = await self.session.execute(stmt)
        return result.rowcount or 0
