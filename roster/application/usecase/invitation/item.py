"""Invitation item shared by invitation use case responses."""

from datetime import datetime

from pydantic import BaseModel

from roster.domain.model import Invitation
from roster.domain.value import InvitationStatus, UserRole


class InvitationItem(BaseModel):
    """Invitation as seen by administrators of its organization."""

    invitation_id: str
    email: str
    first_name: str
    last_name: str
    role: UserRole
    organization_id: str
    invited_by_id: str | None = None
    status: InvitationStatus
    token: str
    acceptance_url: str
    valid: bool
    expires_at: datetime
    created_at: datetime
    accepted_at: datetime | None = None

    @classmethod
    def from_invitation(
        cls, invitation: Invitation, acceptance_url: str, valid: bool
    ) -> "InvitationItem":
        return cls(
            invitation_id=str(invitation.id),
            email=invitation.email.root,
            first_name=invitation.first_name,
            last_name=invitation.last_name,
            role=invitation.role,
            organization_id=str(invitation.organization_id),
            invited_by_id=(
                str(invitation.invited_by_id) if invitation.invited_by_id else None
            ),
            status=invitation.status,
            token=invitation.token.root,
            acceptance_url=acceptance_url,
            valid=valid,
            expires_at=invitation.expires_at,
            created_at=invitation.created_at,
            accepted_at=invitation.accepted_at,
        )
