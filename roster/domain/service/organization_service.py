"""Organization domain service."""

from uuid import uuid4

import logfire

from roster.domain.error import ConflictError, InvalidOperationError, NotFoundError
from roster.domain.model import Organization, User
from roster.domain.repository import OrganizationRepository, TransactionManager
from roster.domain.value import EmailAddress, OrganizationId, Username, UserRole

from .base import Service
from .clock import Clock
from .user_service import UserService


class OrganizationService(Service):
    """Domain service for creating organizations."""

    def __init__(
        self,
        organization_repository: OrganizationRepository,
        user_service: UserService,
        transactions: TransactionManager,
        clock: Clock,
    ) -> None:
        self.organization_repository = organization_repository
        self.user_service = user_service
        self.transactions = transactions
        self.clock = clock

    async def get_by_id(self, organization_id: OrganizationId) -> Organization:
        """Get organization by ID.

        Raises:
            NotFoundError: If organization not found
        """
        organization = await self.organization_repository.find_by_id(organization_id)
        if organization is None:
            raise NotFoundError("Organization", str(organization_id))
        return organization

    async def create_organization(
        self,
        name: str,
        description: str | None,
        admin_username: Username,
        admin_email: EmailAddress,
        admin_first_name: str,
        admin_last_name: str,
        admin_password: str,
    ) -> tuple[Organization, User]:
        """Create an organization together with its first ADMIN.

        An organization never exists without an administrator, so both are
        written in the same unit of work.

        Returns:
            The organization and its first administrator

        Raises:
            InvalidOperationError: If the name is taken or the administrator
                cannot be registered
        """
        with logfire.span("organization_service.create_organization", name=name):
            async with self.transactions.atomic():
                if await self.organization_repository.find_by_name(name):
                    logfire.warn("Organization name taken", name=name)
                    raise InvalidOperationError(
                        f"Organization name already taken: {name}"
                    )

                now = self.clock.now()
                organization = Organization(
                    id=OrganizationId(uuid4()),
                    name=name,
                    description=description,
                    created_at=now,
                    updated_at=now,
                )
                try:
                    organization = await self.organization_repository.save(
                        organization
                    )
                except ConflictError as e:
                    raise InvalidOperationError(e.reason) from e

                admin = await self.user_service.register(
                    username=admin_username,
                    email=admin_email,
                    first_name=admin_first_name,
                    last_name=admin_last_name,
                    password=admin_password,
                    role=UserRole.ADMIN,
                    organization_id=organization.id,
                )

            logfire.info(
                "Organization created",
                organization_id=str(organization.id),
                admin_id=str(admin.id),
            )
            return organization, admin
