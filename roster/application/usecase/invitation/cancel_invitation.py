"""Cancel invitation use case."""

from uuid import UUID

from pydantic import BaseModel

from roster.application.usecase.base import BaseUseCase
from roster.application.usecase.invitation.item import InvitationItem
from roster.domain.service import InvitationService, UserService
from roster.domain.value import InvitationId, UserId


class CancelInvitationRequest(BaseModel):
    """Cancel invitation request."""

    actor_id: str
    invitation_id: str


class CancelInvitationResponse(BaseModel):
    """Cancel invitation response."""

    invitation: InvitationItem


class CancelInvitationUseCase(
    BaseUseCase[CancelInvitationRequest, CancelInvitationResponse]
):
    """Use case for cancelling a pending invitation."""

    def __init__(
        self, invitation_service: InvitationService, user_service: UserService
    ) -> None:
        self.invitation_service = invitation_service
        self.user_service = user_service

    async def execute(
        self, request: CancelInvitationRequest
    ) -> CancelInvitationResponse:
        """Execute cancel invitation flow.

        Raises:
            NotFoundError: If the invitation does not exist
            UnauthorizedError: If the actor may not cancel it
            InvalidOperationError: If it is no longer pending
        """
        actor = await self.user_service.get_actor(UserId(UUID(request.actor_id)))
        invitation = await self.invitation_service.cancel(
            InvitationId(UUID(request.invitation_id)), actor
        )
        return CancelInvitationResponse(
            invitation=InvitationItem.from_invitation(
                invitation,
                acceptance_url=self.invitation_service.acceptance_url(invitation),
                valid=False,
            )
        )
