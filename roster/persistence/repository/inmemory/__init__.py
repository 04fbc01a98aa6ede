"""In-memory repository implementations for testing."""

from .invitation import InMemoryInvitationRepository
from .organization import InMemoryOrganizationRepository
from .transaction import InMemoryTransactionManager
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryInvitationRepository",
    "InMemoryOrganizationRepository",
    "InMemoryTransactionManager",
    "InMemoryUserRepository",
]
