"""PostgreSQL repository implementations."""

from roster.persistence.repository.invitation import PostgresInvitationRepository
from roster.persistence.repository.organization import PostgresOrganizationRepository
from roster.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresInvitationRepository",
    "PostgresOrganizationRepository",
    "PostgresUserRepository",
]
