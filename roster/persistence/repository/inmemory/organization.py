"""In-memory organization repository for testing."""

from typing import Optional

from roster.domain.error import ConflictError
from roster.domain.model import Organization
from roster.domain.repository import OrganizationRepository
from roster.domain.value import OrganizationId


class InMemoryOrganizationRepository(OrganizationRepository):
    """In-memory implementation of OrganizationRepository for testing."""

    def __init__(self) -> None:
        self._organizations: dict[OrganizationId, Organization] = {}

    def snapshot(self) -> dict[OrganizationId, Organization]:
        return dict(self._organizations)

    def restore(self, state: dict[OrganizationId, Organization]) -> None:
        self._organizations = dict(state)

    async def find_by_id(
        self, organization_id: OrganizationId
    ) -> Optional[Organization]:
        """Find an organization by ID."""
        return self._organizations.get(organization_id)

    async def find_by_name(self, name: str) -> Optional[Organization]:
        """Find an organization by name."""
        for organization in self._organizations.values():
            if organization.name == name:
                return organization
        return None

    async def save(self, organization: Organization) -> Organization:
        """Save an organization (create or update).

        Raises:
            ConflictError: If another organization already uses the name
        """
        other = await self.find_by_name(organization.name)
        if other and other.id != organization.id:
            raise ConflictError(f"Duplicate organization name: {organization.name}")
        self._organizations[organization.id] = organization
        return organization

    async def lock(self, organization_id: OrganizationId) -> None:
        """No-op: the in-memory transaction manager already serializes units."""
        return None
