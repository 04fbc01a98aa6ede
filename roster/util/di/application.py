"""Application layer DI providers."""

from dishka import Scope, provide

from roster.application.usecase.invitation import (
    AcceptInvitationUseCase,
    CancelInvitationUseCase,
    CreateInvitationUseCase,
    GetInvitationUseCase,
    GetPendingInvitationsUseCase,
)
from roster.application.usecase.organization import CreateOrganizationUseCase
from roster.application.usecase.user import (
    CreateUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    RemoveUserUseCase,
    UpdateUserRoleUseCase,
    UpdateUserStatusUseCase,
)
from roster.domain.service import InvitationService, OrganizationService, UserService
from roster.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Invitation use cases
    @provide
    def get_create_invitation_use_case(
        self, invitation_service: InvitationService, user_service: UserService
    ) -> CreateInvitationUseCase:
        """Provide create invitation use case."""
        return CreateInvitationUseCase(
            invitation_service=invitation_service, user_service=user_service
        )

    @provide
    def get_pending_invitations_use_case(
        self, invitation_service: InvitationService, user_service: UserService
    ) -> GetPendingInvitationsUseCase:
        """Provide get pending invitations use case."""
        return GetPendingInvitationsUseCase(
            invitation_service=invitation_service, user_service=user_service
        )

    @provide
    def get_cancel_invitation_use_case(
        self, invitation_service: InvitationService, user_service: UserService
    ) -> CancelInvitationUseCase:
        """Provide cancel invitation use case."""
        return CancelInvitationUseCase(
            invitation_service=invitation_service, user_service=user_service
        )

    @provide
    def get_get_invitation_use_case(
        self,
        invitation_service: InvitationService,
        organization_service: OrganizationService,
    ) -> GetInvitationUseCase:
        """Provide get invitation by token use case."""
        return GetInvitationUseCase(
            invitation_service=invitation_service,
            organization_service=organization_service,
        )

    @provide
    def get_accept_invitation_use_case(
        self, invitation_service: InvitationService
    ) -> AcceptInvitationUseCase:
        """Provide accept invitation use case."""
        return AcceptInvitationUseCase(invitation_service=invitation_service)

    # User use cases
    @provide
    def get_list_users_use_case(self, user_service: UserService) -> ListUsersUseCase:
        """Provide list users use case."""
        return ListUsersUseCase(user_service=user_service)

    @provide
    def get_get_user_use_case(self, user_service: UserService) -> GetUserUseCase:
        """Provide get user use case."""
        return GetUserUseCase(user_service=user_service)

    @provide
    def get_create_user_use_case(self, user_service: UserService) -> CreateUserUseCase:
        """Provide create user use case."""
        return CreateUserUseCase(user_service=user_service)

    @provide
    def get_update_user_role_use_case(
        self, user_service: UserService
    ) -> UpdateUserRoleUseCase:
        """Provide update user role use case."""
        return UpdateUserRoleUseCase(user_service=user_service)

    @provide
    def get_update_user_status_use_case(
        self, user_service: UserService
    ) -> UpdateUserStatusUseCase:
        """Provide update user status use case."""
        return UpdateUserStatusUseCase(user_service=user_service)

    @provide
    def get_remove_user_use_case(self, user_service: UserService) -> RemoveUserUseCase:
        """Provide remove user use case."""
        return RemoveUserUseCase(user_service=user_service)

    # Organization use cases
    @provide
    def get_create_organization_use_case(
        self, organization_service: OrganizationService
    ) -> CreateOrganizationUseCase:
        """Provide create organization use case."""
        return CreateOrganizationUseCase(organization_service=organization_service)
