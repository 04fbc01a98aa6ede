"""Get invitation by token use case.

Public: the token is the credential, no acting user is needed.
"""

from datetime import datetime

from pydantic import BaseModel

from roster.application.usecase.base import BaseUseCase
from roster.domain.service import InvitationService, OrganizationService
from roster.domain.value import InvitationStatus, InvitationToken, UserRole


class GetInvitationRequest(BaseModel):
    """Get invitation request."""

    token: str


class GetInvitationResponse(BaseModel):
    """What the invitee sees before accepting."""

    email: str
    first_name: str
    last_name: str
    role: UserRole
    organization_id: str
    organization_name: str
    status: InvitationStatus
    valid: bool
    expires_at: datetime


class GetInvitationUseCase(BaseUseCase[GetInvitationRequest, GetInvitationResponse]):
    """Use case for looking up an invitation by token."""

    def __init__(
        self,
        invitation_service: InvitationService,
        organization_service: OrganizationService,
    ) -> None:
        self.invitation_service = invitation_service
        self.organization_service = organization_service

    async def execute(self, request: GetInvitationRequest) -> GetInvitationResponse:
        """Execute lookup.

        Raises:
            NotFoundError: If no invitation has this token
        """
        invitation = await self.invitation_service.get_by_token(
            InvitationToken(request.token)
        )
        organization = await self.organization_service.get_by_id(
            invitation.organization_id
        )

        return GetInvitationResponse(
            email=invitation.email.root,
            first_name=invitation.first_name,
            last_name=invitation.last_name,
            role=invitation.role,
            organization_id=str(organization.id),
            organization_name=organization.name,
            status=invitation.status,
            valid=self.invitation_service.is_valid(invitation),
            expires_at=invitation.expires_at,
        )
