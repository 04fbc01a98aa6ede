"""Unit tests for the token-facing invitation use cases."""

from datetime import timedelta

import pytest

from roster.application.usecase.invitation import (
    AcceptInvitationRequest,
    AcceptInvitationUseCase,
    CancelInvitationRequest,
    CancelInvitationUseCase,
    GetInvitationRequest,
    GetInvitationUseCase,
    GetPendingInvitationsRequest,
    GetPendingInvitationsUseCase,
)
from roster.domain.error import InvalidOperationError, NotFoundError
from roster.domain.service import FrozenClock
from roster.domain.value import InvitationStatus, UserRole, UserStatus
from tests.conftest import seed_invitation, seed_organization, seed_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetInvitationUseCase:
    """Tests for GetInvitationUseCase."""

    @pytest.mark.asyncio
    async def test_shows_organization_and_validity(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetInvitationUseCase)
        clock = await unit_env.get(FrozenClock)
        org = await seed_organization(unit_env, "Acme")
        admin = await seed_user(unit_env, org, "admin1", UserRole.ADMIN)
        invitation = await seed_invitation(unit_env, admin, "jane@example.com")

        # Act
        before = await use_case.execute(
            GetInvitationRequest(token=invitation.token.root)
        )
        clock.advance(timedelta(hours=24))
        after = await use_case.execute(GetInvitationRequest(token=invitation.token.root))

        # Assert
        assert before.organization_name == "Acme"
        assert before.valid is True
        assert after.valid is False
        assert after.status is InvitationStatus.PENDING

    @pytest.mark.asyncio
    async def test_unknown_token(self, unit_env):
        use_case = await unit_env.get(GetInvitationUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetInvitationRequest(token="nope"))


class TestAcceptInvitationUseCase:
    """Tests for AcceptInvitationUseCase."""

    @pytest.mark.asyncio
    async def test_accept_returns_active_user(self, unit_env):
        use_case = await unit_env.get(AcceptInvitationUseCase)
        org = await seed_organization(unit_env)
        admin = await seed_user(unit_env, org, "admin1", UserRole.ADMIN)
        invitation = await seed_invitation(
            unit_env, admin, "jane@example.com", role=UserRole.UNPAID_ADMIN
        )

        response = await use_case.execute(
            AcceptInvitationRequest(
                token=invitation.token.root, username="jane", password="s3cret"
            )
        )

        assert response.user.username == "jane"
        assert response.user.email == "jane@example.com"
        assert response.user.role is UserRole.UNPAID_ADMIN
        assert response.user.status is UserStatus.ACTIVE
        assert response.user.organization_id == str(org.id)

    @pytest.mark.asyncio
    async def test_cancelled_invitation_rejected(self, unit_env):
        use_case = await unit_env.get(AcceptInvitationUseCase)
        org = await seed_organization(unit_env)
        admin = await seed_user(unit_env, org, "admin1", UserRole.ADMIN)
        invitation = await seed_invitation(
            unit_env, admin, "jane@example.com", status=InvitationStatus.CANCELLED
        )

        with pytest.raises(InvalidOperationError):
            await use_case.execute(
                AcceptInvitationRequest(
                    token=invitation.token.root, username="jane", password="s3cret"
                )
            )


class TestCancelAndListUseCases:
    """Tests for CancelInvitationUseCase and GetPendingInvitationsUseCase."""

    @pytest.mark.asyncio
    async def test_cancelled_invitation_leaves_pending_list(self, unit_env):
        # Arrange
        cancel = await unit_env.get(CancelInvitationUseCase)
        pending = await unit_env.get(GetPendingInvitationsUseCase)
        org = await seed_organization(unit_env)
        admin = await seed_user(unit_env, org, "admin1", UserRole.ADMIN)
        keep = await seed_invitation(unit_env, admin, "keep@example.com")
        drop = await seed_invitation(unit_env, admin, "drop@example.com")

        # Act
        response = await cancel.execute(
            CancelInvitationRequest(actor_id=str(admin.id), invitation_id=str(drop.id))
        )
        listing = await pending.execute(
            GetPendingInvitationsRequest(actor_id=str(admin.id))
        )

        # Assert
        assert response.invitation.status is InvitationStatus.CANCELLED
        assert response.invitation.valid is False
        assert listing.total == 1
        assert listing.invitations[0].invitation_id == str(keep.id)
