"""Repository interfaces for the membership domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from roster.domain.repository.invitation import InvitationRepository
from roster.domain.repository.organization import OrganizationRepository
from roster.domain.repository.transaction import TransactionManager
from roster.domain.repository.user import UserRepository

__all__ = [
    "InvitationRepository",
    "OrganizationRepository",
    "TransactionManager",
    "UserRepository",
]
