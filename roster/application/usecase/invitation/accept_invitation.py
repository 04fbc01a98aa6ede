"""Accept invitation use case."""

from pydantic import BaseModel, Field

from roster.application.usecase.base import BaseUseCase
from roster.application.usecase.user.item import UserItem
from roster.domain.service import InvitationService
from roster.domain.value import InvitationToken, Username


class AcceptInvitationRequest(BaseModel):
    """Accept invitation request."""

    token: str
    username: str
    password: str = Field(repr=False)


class AcceptInvitationResponse(BaseModel):
    """Accept invitation response."""

    user: UserItem


class AcceptInvitationUseCase(
    BaseUseCase[AcceptInvitationRequest, AcceptInvitationResponse]
):
    """Use case for turning an invitation into a user account."""

    def __init__(self, invitation_service: InvitationService) -> None:
        self.invitation_service = invitation_service

    async def execute(
        self, request: AcceptInvitationRequest
    ) -> AcceptInvitationResponse:
        """Execute accept flow.

        Raises:
            NotFoundError: If no invitation has this token
            InvalidOperationError: If the invitation is not valid or the
                account cannot be registered
        """
        user = await self.invitation_service.accept(
            token=InvitationToken(request.token),
            username=Username(request.username),
            password=request.password,
        )
        return AcceptInvitationResponse(user=UserItem.from_user(user))
