"""Domain layer DI providers."""

from dishka import Scope, provide

from roster.config import SecuritySettings, Settings
from roster.domain.repository import (
    InvitationRepository,
    OrganizationRepository,
    TransactionManager,
    UserRepository,
)
from roster.domain.service import (
    Clock,
    ExpirySweeper,
    InvitationNotifier,
    InvitationService,
    OrganizationService,
    PasswordHasher,
    PermissionService,
    UserService,
)
from roster.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_permission_service(
        self, user_repository: UserRepository
    ) -> PermissionService:
        """Provide the role/permission engine."""
        return PermissionService(user_repository=user_repository)

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        organization_repository: OrganizationRepository,
        invitation_repository: InvitationRepository,
        permission_service: PermissionService,
        password_hasher: PasswordHasher,
        transactions: TransactionManager,
        clock: Clock,
        security_settings: SecuritySettings,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            organization_repository=organization_repository,
            invitation_repository=invitation_repository,
            permission_service=permission_service,
            password_hasher=password_hasher,
            transactions=transactions,
            clock=clock,
            security_settings=security_settings,
        )

    @provide
    def get_invitation_service(
        self,
        invitation_repository: InvitationRepository,
        user_repository: UserRepository,
        organization_repository: OrganizationRepository,
        user_service: UserService,
        notifier: InvitationNotifier,
        transactions: TransactionManager,
        clock: Clock,
        settings: Settings,
    ) -> InvitationService:
        """Provide invitation domain service."""
        return InvitationService(
            invitation_repository=invitation_repository,
            user_repository=user_repository,
            organization_repository=organization_repository,
            user_service=user_service,
            notifier=notifier,
            transactions=transactions,
            clock=clock,
            settings=settings,
        )

    @provide
    def get_organization_service(
        self,
        organization_repository: OrganizationRepository,
        user_service: UserService,
        transactions: TransactionManager,
        clock: Clock,
    ) -> OrganizationService:
        """Provide organization domain service."""
        return OrganizationService(
            organization_repository=organization_repository,
            user_service=user_service,
            transactions=transactions,
            clock=clock,
        )

    @provide
    def get_expiry_sweeper(
        self,
        invitation_repository: InvitationRepository,
        transactions: TransactionManager,
        clock: Clock,
    ) -> ExpirySweeper:
        """Provide the invitation expiry sweeper."""
        return ExpirySweeper(
            invitation_repository=invitation_repository,
            transactions=transactions,
            clock=clock,
        )
