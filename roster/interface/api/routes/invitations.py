"""Invitation routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from roster.application.usecase.invitation import (
    AcceptInvitationRequest,
    AcceptInvitationResponse,
    AcceptInvitationUseCase,
    CancelInvitationRequest,
    CancelInvitationResponse,
    CancelInvitationUseCase,
    CreateInvitationRequest,
    CreateInvitationResponse,
    CreateInvitationUseCase,
    GetInvitationRequest,
    GetInvitationResponse,
    GetInvitationUseCase,
    GetPendingInvitationsRequest,
    GetPendingInvitationsResponse,
    GetPendingInvitationsUseCase,
)
from roster.domain.value import UserRole
from roster.interface.api.deps import ActorId

router = APIRouter(prefix="/invitations", tags=["invitations"], route_class=DishkaRoute)


class CreateInvitationAPIRequest(BaseModel):
    """API request for inviting someone."""

    email: str
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    role: UserRole = UserRole.MEMBER


@router.post(
    "", response_model=CreateInvitationResponse, status_code=status.HTTP_201_CREATED
)
async def create_invitation(
    request: CreateInvitationAPIRequest,
    actor_id: ActorId,
    create_invitation_use_case: FromDishka[CreateInvitationUseCase],
) -> CreateInvitationResponse:
    """Invite someone into the caller's organization."""
    return await create_invitation_use_case.execute(
        CreateInvitationRequest(actor_id=actor_id, **request.model_dump())
    )


@router.get("/pending", response_model=GetPendingInvitationsResponse)
async def get_pending_invitations(
    actor_id: ActorId,
    get_pending_invitations_use_case: FromDishka[GetPendingInvitationsUseCase],
) -> GetPendingInvitationsResponse:
    """List valid invitations of the caller's organization."""
    return await get_pending_invitations_use_case.execute(
        GetPendingInvitationsRequest(actor_id=actor_id)
    )


@router.post("/{invitation_id}/cancel", response_model=CancelInvitationResponse)
async def cancel_invitation(
    invitation_id: UUID,
    actor_id: ActorId,
    cancel_invitation_use_case: FromDishka[CancelInvitationUseCase],
) -> CancelInvitationResponse:
    """Cancel a pending invitation."""
    return await cancel_invitation_use_case.execute(
        CancelInvitationRequest(actor_id=actor_id, invitation_id=str(invitation_id))
    )


@router.get("/token/{token}", response_model=GetInvitationResponse)
async def get_invitation(
    token: str,
    get_invitation_use_case: FromDishka[GetInvitationUseCase],
) -> GetInvitationResponse:
    """Look up an invitation by token (no authentication)."""
    return await get_invitation_use_case.execute(GetInvitationRequest(token=token))


@router.post(
    "/accept",
    response_model=AcceptInvitationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def accept_invitation(
    request: AcceptInvitationRequest,
    accept_invitation_use_case: FromDishka[AcceptInvitationUseCase],
) -> AcceptInvitationResponse:
    """Accept an invitation and create the account (no authentication)."""
    return await accept_invitation_use_case.execute(request)
