"""Invitation entity.

An invitation is a time-limited offer of membership in one organization,
addressed to an email and redeemable once through its token.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from roster.domain.model.common import DomainModel, utcnow
from roster.domain.value import (
    EmailAddress,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    OrganizationId,
    UserId,
    UserRole,
)


class Invitation(DomainModel):
    """Invitation entity.

    Business rules:
    - Token is unique and never changes after creation
    - Status only moves out of PENDING, never back
    - At most one valid invitation per (email, organization)
    - Accepting creates a new user; the invitation keeps no link to it
    - The inviter reference is cleared when the inviter is removed
    """

    id: InvitationId
    email: EmailAddress
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    role: UserRole
    organization_id: OrganizationId
    invited_by_id: Optional[UserId] = None
    token: InvitationToken
    status: InvitationStatus = InvitationStatus.PENDING
    expires_at: datetime
    created_at: datetime = Field(default_factory=utcnow)
    accepted_at: Optional[datetime] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def is_valid(self, now: datetime) -> bool:
        """Valid means still PENDING and ``now`` is before the deadline."""
        return self.status is InvitationStatus.PENDING and now < self.expires_at
