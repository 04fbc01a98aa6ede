"""Create invitation use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from roster.application.usecase.base import BaseUseCase
from roster.application.usecase.invitation.item import InvitationItem
from roster.domain.service import InvitationService, UserService
from roster.domain.value import EmailAddress, UserId, UserRole


class CreateInvitationRequest(BaseModel):
    """Create invitation request."""

    actor_id: str  # Acting user ID
    email: str
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    role: UserRole = UserRole.MEMBER


class CreateInvitationResponse(BaseModel):
    """Create invitation response."""

    invitation: InvitationItem


class CreateInvitationUseCase(
    BaseUseCase[CreateInvitationRequest, CreateInvitationResponse]
):
    """Use case for inviting a new member into the actor's organization."""

    def __init__(
        self, invitation_service: InvitationService, user_service: UserService
    ) -> None:
        """Initialize create invitation use case.

        Args:
            invitation_service: Invitation service
            user_service: User service
        """
        self.invitation_service = invitation_service
        self.user_service = user_service

    async def execute(
        self, request: CreateInvitationRequest
    ) -> CreateInvitationResponse:
        """Execute create invitation flow.

        Raises:
            UnauthorizedError: If the actor may not invite
            InvalidOperationError: If the invitee is a member or already invited
            ConflictError: If a concurrent invitation for the same email won
        """
        actor = await self.user_service.get_actor(UserId(UUID(request.actor_id)))

        invitation = await self.invitation_service.invite(
            actor=actor,
            email=EmailAddress(request.email),
            first_name=request.first_name,
            last_name=request.last_name,
            role=request.role,
        )

        return CreateInvitationResponse(
            invitation=InvitationItem.from_invitation(
                invitation,
                acceptance_url=self.invitation_service.acceptance_url(invitation),
                valid=self.invitation_service.is_valid(invitation),
            )
        )
