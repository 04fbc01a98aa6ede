"""User entity.

A user belongs to exactly one organization. Users are created either by an
administrator directly or by accepting an invitation.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from roster.domain.model.common import DomainModel, utcnow
from roster.domain.value import (
    EmailAddress,
    OrganizationId,
    UserId,
    Username,
    UserRole,
    UserStatus,
)


class User(DomainModel):
    """User entity.

    Business rules:
    - Username is unique across all organizations
    - Email is unique within the organization
    - An administrator may only be removed, demoted or deactivated while
      another administrator remains in the organization
    """

    id: UserId
    username: Username
    email: EmailAddress
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    password_hash: str
    role: UserRole = UserRole.MEMBER
    status: UserStatus = UserStatus.ACTIVE
    organization_id: OrganizationId
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
    last_login_at: Optional[datetime] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def is_administrator(self) -> bool:
        return self.role.is_administrator

    @property
    def is_active(self) -> bool:
        return self.status is UserStatus.ACTIVE
