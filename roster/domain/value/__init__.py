"""Domain value objects for membership management."""

from roster.domain.value.identifiers import InvitationId, OrganizationId, UserId
from roster.domain.value.types import (
    EmailAddress,
    InvitationStatus,
    InvitationToken,
    Username,
    UserRole,
    UserStatus,
)

__all__ = [
    # Identifiers
    "OrganizationId",
    "UserId",
    "InvitationId",
    # Types
    "EmailAddress",
    "InvitationStatus",
    "InvitationToken",
    "Username",
    "UserRole",
    "UserStatus",
]
