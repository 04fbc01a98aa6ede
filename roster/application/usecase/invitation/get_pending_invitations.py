"""Get pending invitations use case."""

from uuid import UUID

from pydantic import BaseModel

from roster.application.usecase.base import BaseUseCase
from roster.application.usecase.invitation.item import InvitationItem
from roster.domain.service import InvitationService, UserService
from roster.domain.value import UserId


class GetPendingInvitationsRequest(BaseModel):
    """Get pending invitations request."""

    actor_id: str


class GetPendingInvitationsResponse(BaseModel):
    """Get pending invitations response."""

    invitations: list[InvitationItem]
    total: int


class GetPendingInvitationsUseCase(
    BaseUseCase[GetPendingInvitationsRequest, GetPendingInvitationsResponse]
):
    """Use case for listing the valid invitations of the actor's organization."""

    def __init__(
        self, invitation_service: InvitationService, user_service: UserService
    ) -> None:
        self.invitation_service = invitation_service
        self.user_service = user_service

    async def execute(
        self, request: GetPendingInvitationsRequest
    ) -> GetPendingInvitationsResponse:
        actor = await self.user_service.get_actor(UserId(UUID(request.actor_id)))
        invitations = await self.invitation_service.get_pending_invitations(actor)

        items = [
            InvitationItem.from_invitation(
                invitation,
                acceptance_url=self.invitation_service.acceptance_url(invitation),
                valid=True,
            )
            for invitation in invitations
        ]
        return GetPendingInvitationsResponse(invitations=items, total=len(items))
