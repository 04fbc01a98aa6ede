"""Create organization use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from roster.application.usecase.base import BaseUseCase
from roster.application.usecase.user.item import UserItem
from roster.domain.service import OrganizationService
from roster.domain.value import EmailAddress, Username


class CreateOrganizationRequest(BaseModel):
    """Create organization request, including its first administrator."""

    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    admin_username: str
    admin_email: str
    admin_first_name: str = Field(min_length=1, max_length=100)
    admin_last_name: str = Field(min_length=1, max_length=100)
    admin_password: str = Field(repr=False)


class OrganizationItem(BaseModel):
    """Organization item in response."""

    organization_id: str
    name: str
    description: str | None
    created_at: datetime


class CreateOrganizationResponse(BaseModel):
    """Create organization response."""

    organization: OrganizationItem
    admin: UserItem


class CreateOrganizationUseCase(
    BaseUseCase[CreateOrganizationRequest, CreateOrganizationResponse]
):
    """Use case for bootstrapping an organization and its first ADMIN."""

    def __init__(self, organization_service: OrganizationService) -> None:
        self.organization_service = organization_service

    async def execute(
        self, request: CreateOrganizationRequest
    ) -> CreateOrganizationResponse:
        """Execute create organization flow.

        Raises:
            InvalidOperationError: If the name is taken or the administrator
                cannot be registered
        """
        organization, admin = await self.organization_service.create_organization(
            name=request.name,
            description=request.description,
            admin_username=Username(request.admin_username),
            admin_email=EmailAddress(request.admin_email),
            admin_first_name=request.admin_first_name,
            admin_last_name=request.admin_last_name,
            admin_password=request.admin_password,
        )
        return CreateOrganizationResponse(
            organization=OrganizationItem(
                organization_id=str(organization.id),
                name=organization.name,
                description=organization.description,
                created_at=organization.created_at,
            ),
            admin=UserItem.from_user(admin),
        )
