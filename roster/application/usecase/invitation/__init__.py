"""Invitation use cases."""

from roster.application.usecase.invitation.accept_invitation import (
    AcceptInvitationRequest,
    AcceptInvitationResponse,
    AcceptInvitationUseCase,
)
from roster.application.usecase.invitation.cancel_invitation import (
    CancelInvitationRequest,
    CancelInvitationResponse,
    CancelInvitationUseCase,
)
from roster.application.usecase.invitation.create_invitation import (
    CreateInvitationRequest,
    CreateInvitationResponse,
    CreateInvitationUseCase,
)
from roster.application.usecase.invitation.get_invitation import (
    GetInvitationRequest,
    GetInvitationResponse,
    GetInvitationUseCase,
)
from roster.application.usecase.invitation.get_pending_invitations import (
    GetPendingInvitationsRequest,
    GetPendingInvitationsResponse,
    GetPendingInvitationsUseCase,
)
from roster.application.usecase.invitation.item import InvitationItem

__all__ = [
    "AcceptInvitationRequest",
    "AcceptInvitationResponse",
    "AcceptInvitationUseCase",
    "CancelInvitationRequest",
    "CancelInvitationResponse",
    "CancelInvitationUseCase",
    "CreateInvitationRequest",
    "CreateInvitationResponse",
    "CreateInvitationUseCase",
    "GetInvitationRequest",
    "GetInvitationResponse",
    "GetInvitationUseCase",
    "GetPendingInvitationsRequest",
    "GetPendingInvitationsResponse",
    "GetPendingInvitationsUseCase",
    "InvitationItem",
]
