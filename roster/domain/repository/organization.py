"""Organization repository interface."""

from abc import ABC, abstractmethod

from roster.domain.model import Organization
from roster.domain.value import OrganizationId


class OrganizationRepository(ABC):
    """Repository for Organization entity."""

    @abstractmethod
    async def find_by_id(self, organization_id: OrganizationId) -> Organization | None:
        """Find an organization by ID.

        Args:
            organization_id: The organization's unique identifier

        Returns:
            The organization if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_name(self, name: str) -> Organization | None:
        """Find an organization by its unique name."""
        pass

    @abstractmethod
    async def save(self, organization: Organization) -> Organization:
        """Save an organization (create or update).

        Raises:
            ConflictError: If another organization already uses the name
        """
        pass

    @abstractmethod
    async def lock(self, organization_id: OrganizationId) -> None:
        """Serialize membership mutations of one organization.

        Held until the surrounding unit of work ends. Callers take it before
        reading the administrator count they are about to act on.

        Args:
            organization_id: Organization to lock
        """
        pass
