"""In-memory invitation repository for testing."""

from datetime import datetime
from typing import Any, Optional

from roster.domain.error import ConflictError
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


class InMemoryInvitationRepository(InvitationRepository):
    """In-memory implementation of InvitationRepository for testing."""

    def __init__(self) -> None:
        self._invitations: dict[InvitationId, Invitation] = {}

    def snapshot(self) -> dict[InvitationId, Invitation]:
        return dict(self._invitations)

    def restore(self, state: dict[InvitationId, Invitation]) -> None:
        self._invitations = dict(state)

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        """Find an invitation by ID."""
        return self._invitations.get(invitation_id)

    async def find_by_token(self, token: InvitationToken) -> Optional[Invitation]:
        """Find an invitation by token."""
        for invitation in self._invitations.values():
            if invitation.token == token:
                return invitation
        return None

    async def find_pending_by_email(
        self, email: EmailAddress, organization_id: OrganizationId
    ) -> Optional[Invitation]:
        """Find the pending invitation for an email in an organization."""
        for invitation in self._invitations.values():
            if (
                invitation.email == email
                and invitation.organization_id == organization_id
                and invitation.status is InvitationStatus.PENDING
            ):
                return invitation
        return None

    async def find_by_organization(
        self,
        organization_id: OrganizationId,
        status: Optional[InvitationStatus] = None,
    ) -> list[Invitation]:
        """List invitations of an organization, newest first."""
        matches = [
            invitation
            for invitation in self._invitations.values()
            if invitation.organization_id == organization_id
            and (status is None or invitation.status is status)
        ]
        matches.sort(key=lambda invitation: invitation.created_at, reverse=True)
        return matches

    async def find_expired_pending(self, now: datetime) -> list[Invitation]:
        """Find pending invitations with a deadline before ``now``."""
        matches = [
            invitation
            for invitation in self._invitations.values()
            if invitation.status is InvitationStatus.PENDING
            and invitation.expires_at < now
        ]
        matches.sort(key=lambda invitation: invitation.expires_at)
        return matches

    async def save(self, invitation: Invitation) -> Invitation:
        """Insert a new invitation.

        Raises:
            ConflictError: If the token is taken or a pending invitation
                already exists for the same email and organization
        """
        if invitation.id in self._invitations:
            raise ConflictError(f"Duplicate invitation id: {invitation.id}")
        if await self.find_by_token(invitation.token):
            raise ConflictError("Duplicate invitation token")
        if invitation.status is InvitationStatus.PENDING and (
            await self.find_pending_by_email(
                invitation.email, invitation.organization_id
            )
        ):
            raise ConflictError("Duplicate pending invitation")

        self._invitations[invitation.id] = invitation
        return invitation

    async def transition_status(
        self,
        invitation_id: InvitationId,
        expected: InvitationStatus,
        new: InvitationStatus,
        accepted_at: Optional[datetime] = None,
    ) -> Optional[Invitation]:
        """Compare-and-set the status of an invitation."""
        current = self._invitations.get(invitation_id)
        if current is None or current.status is not expected:
            return None

        update: dict[str, Any] = {"status": new}
        if accepted_at is not None:
            update["accepted_at"] = accepted_at
        updated = current.model_copy(update=update)
        self._invitations[invitation_id] = updated
        return updated

    async def detach_inviter(self, user_id: UserId) -> int:
        """Null the inviter of invitations sent by ``user_id``."""
        detached = 0
        for invitation_id, invitation in list(self._invitations.items()):
            if invitation.invited_by_id == user_id:
                self._invitations[invitation_id] = invitation.model_copy(
                    update={"invited_by_id": None}
                )
                detached += 1
        return detached
