"""Unit tests for PermissionService and can_manage."""

import pytest

from roster.domain.error import InvalidOperationError, UnauthorizedError
from roster.domain.repository import UserRepository
from roster.domain.service import PermissionService, can_manage
from roster.domain.value import UserRole, UserStatus
from tests.conftest import seed_organization, seed_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestCanManage:
    """Tests for the manage-ability table."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "actor_role, target_role, expected",
        [
            (UserRole.ADMIN, UserRole.ADMIN, True),
            (UserRole.ADMIN, UserRole.UNPAID_ADMIN, True),
            (UserRole.ADMIN, UserRole.MEMBER, True),
            (UserRole.UNPAID_ADMIN, UserRole.ADMIN, False),
            (UserRole.UNPAID_ADMIN, UserRole.UNPAID_ADMIN, True),
            (UserRole.UNPAID_ADMIN, UserRole.MEMBER, True),
            (UserRole.MEMBER, UserRole.ADMIN, False),
            (UserRole.MEMBER, UserRole.UNPAID_ADMIN, False),
            (UserRole.MEMBER, UserRole.MEMBER, False),
        ],
    )
    async def test_role_table(self, unit_env, actor_role, target_role, expected):
        """Manage-ability depends only on the two roles."""
        # Arrange
        org = await seed_organization(unit_env)
        actor = await seed_user(unit_env, org, "actor", actor_role)
        target = await seed_user(unit_env, org, "target", target_role)

        # Act / Assert
        assert can_manage(actor, target) is expected

    @pytest.mark.asyncio
    @pytest.mark.parametrize("role", list(UserRole))
    async def test_nobody_manages_themselves(self, unit_env, role):
        """A user never manages themselves, whatever the role."""
        org = await seed_organization(unit_env)
        user = await seed_user(unit_env, org, "self", role)

        assert can_manage(user, user) is False


class TestAcmeScenario:
    """Acme: ADMIN alice, MEMBER bob, optionally a second ADMIN carol."""

    @pytest.mark.asyncio
    async def test_removal_rules(self, unit_env):
        # Arrange
        service = await unit_env.get(PermissionService)
        org = await seed_organization(unit_env, "Acme")
        alice = await seed_user(unit_env, org, "alice", UserRole.ADMIN)
        bob = await seed_user(unit_env, org, "bob", UserRole.MEMBER)

        # Act / Assert
        with pytest.raises(UnauthorizedError):
            await service.authorize_removal(alice, alice)
        with pytest.raises(UnauthorizedError):
            await service.authorize_removal(bob, alice)
        await service.authorize_removal(alice, bob)

    @pytest.mark.asyncio
    async def test_demoting_second_admin_then_repeating(self, unit_env):
        """The first demotion succeeds; the same request with one admin left fails."""
        # Arrange
        service = await unit_env.get(PermissionService)
        user_repo = await unit_env.get(UserRepository)
        org = await seed_organization(unit_env, "Acme")
        alice = await seed_user(unit_env, org, "alice", UserRole.ADMIN)
        carol = await seed_user(unit_env, org, "carol", UserRole.ADMIN)
        await seed_user(unit_env, org, "bob", UserRole.MEMBER)

        # Act - first demotion
        applies = await service.authorize_role_change(alice, carol, UserRole.MEMBER)
        assert applies is True
        await user_repo.save(carol.model_copy(update={"role": UserRole.MEMBER}))

        # Assert - repeating the decision against the stale snapshot of carol
        # now sees a single administrator
        with pytest.raises(InvalidOperationError) as exc_info:
            await service.authorize_role_change(alice, carol, UserRole.MEMBER)
        assert "last administrator" in exc_info.value.reason
        assert await user_repo.count_admins(org.id) == 1


class TestAuthorizeRoleChange:
    """Tests for authorize_role_change."""

    @pytest.mark.asyncio
    async def test_admin_demotes_unpaid_admin(self, unit_env):
        service = await unit_env.get(PermissionService)
        org = await seed_organization(unit_env)
        admin = await seed_user(unit_env, org, "admin1", UserRole.ADMIN)
        unpaid = await seed_user(unit_env, org, "unpaid1", UserRole.UNPAID_ADMIN)

        assert await service.authorize_role_change(admin, unpaid, UserRole.MEMBER)

    @pytest.mark.asyncio
    async def test_sole_active_admin_cannot_be_demoted(self, unit_env):
        """Inactive administrators do not count toward the invariant."""
        # Arrange - the actor is a locked ADMIN, so only the target counts
        service = await unit_env.get(PermissionService)
        org = await seed_organization(unit_env)
        locked = await seed_user(
            unit_env, org, "locked1", UserRole.ADMIN, UserStatus.LOCKED
        )
        admin = await seed_user(unit_env, org, "admin1", UserRole.ADMIN)

        # Act / Assert
        with pytest.raises(InvalidOperationError):
            await service.authorize_role_change(locked, admin, UserRole.MEMBER)

    @pytest.mark.asyncio
    async def test_switching_between_admin_roles_is_not_a_demotion(self, unit_env):
        """ADMIN to UNPAID_ADMIN keeps administrative power, so no guard applies."""
        service = await unit_env.get(PermissionService)
        org = await seed_organization(unit_env)
        locked = await seed_user(
            unit_env, org, "locked1", UserRole.ADMIN, UserStatus.LOCKED
        )
        admin = await seed_user(unit_env, org, "admin1", UserRole.ADMIN)

        assert await service.authorize_role_change(
            locked, admin, UserRole.UNPAID_ADMIN
        )

    @pytest.mark.asyncio
    async def test_same_role_is_noop(self, unit_env):
        """Requesting the role the target already has is not an error."""
        service = await unit_env.get(PermissionService)
        org = await seed_organization(unit_env)
        admin = await seed_user(unit_env, org, "admin1", UserRole.ADMIN)
        member = await seed_user(unit_env, org, "member1")

        applies = await service.authorize_role_change(admin, member, UserRole.MEMBER)

        assert applies is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize("target_role", [UserRole.MEMBER, UserRole.UNPAID_ADMIN])
    async def test_unpaid_admin_cannot_grant_admin(self, unit_env, target_role):
        """An UNPAID_ADMIN may not make anyone ADMIN."""
        service = await unit_env.get(PermissionService)
        org = await seed_organization(unit_env)
        await seed_user(unit_env, org, "admin1", UserRole.ADMIN)
        unpaid = await seed_user(unit_env, org, "unpaid1", UserRole.UNPAID_ADMIN)
        target = await seed_user(unit_env, org, "target1", target_role)

        with pytest.raises(UnauthorizedError):
            await service.authorize_role_change(unpaid, target, UserRole.ADMIN)

    @pytest.mark.asyncio
    async def test_unpaid_admin_promotes_to_own_level(self, unit_env):
        service = await unit_env.get(PermissionService)
        org = await seed_organization(unit_env)
        unpaid = await seed_user(unit_env, org, "unpaid1", UserRole.UNPAID_ADMIN)
        member = await seed_user(unit_env, org, "member1")

        assert await service.authorize_role_change(
            unpaid, member, UserRole.UNPAID_ADMIN
        )

    @pytest.mark.asyncio
    async def test_unpaid_admin_cannot_touch_admin(self, unit_env):
        """An ADMIN is out of reach for an UNPAID_ADMIN."""
        service = await unit_env.get(PermissionService)
        org = await seed_organization(unit_env)
        admin = await seed_user(unit_env, org, "admin1", UserRole.ADMIN)
        unpaid = await seed_user(unit_env, org, "unpaid1", UserRole.UNPAID_ADMIN)

        with pytest.raises(UnauthorizedError):
            await service.authorize_role_change(unpaid, admin, UserRole.MEMBER)

    @pytest.mark.asyncio
    async def test_member_cannot_manage(self, unit_env):
        """A MEMBER manages no one."""
        service = await unit_env.get(PermissionService)
        org = await seed_organization(unit_env)
        member = await seed_user(unit_env, org, "member1")
        other = await seed_user(unit_env, org, "member2")

        with pytest.raises(UnauthorizedError):
            await service.authorize_role_change(member, other, UserRole.UNPAID_ADMIN)

    @pytest.mark.asyncio
    async def test_self_demotion_rejected(self, unit_env):
        """An administrator cannot change their own role."""
        service = await unit_env.get(PermissionService)
        org = await seed_organization(unit_env)
        admin = await seed_user(unit_env, org, "admin1", UserRole.ADMIN)
        await seed_user(unit_env, org, "admin2", UserRole.ADMIN)

        with pytest.raises(UnauthorizedError):
            await service.authorize_role_change(admin, admin, UserRole.MEMBER)

    @pytest.mark.asyncio
    async def test_cross_organization_rejected(self, unit_env):
        """Administrators cannot manage users of another organization."""
        service = await unit_env.get(PermissionService)
        acme = await seed_organization(unit_env, "Acme")
        globex = await seed_organization(unit_env, "Globex")
        admin = await seed_user(unit_env, acme, "acme_admin", UserRole.ADMIN)
        outsider = await seed_user(unit_env, globex, "globex_member")

        with pytest.raises(UnauthorizedError):
            await service.authorize_role_change(admin, outsider, UserRole.UNPAID_ADMIN)


class TestAuthorizeRemoval:
    """Tests for authorize_removal."""

    @pytest.mark.asyncio
    async def test_sole_active_admin_removal_rejected(self, unit_env):
        service = await unit_env.get(PermissionService)
        org = await seed_organization(unit_env)
        inactive = await seed_user(
            unit_env, org, "admin2", UserRole.ADMIN, UserStatus.INACTIVE
        )
        admin = await seed_user(unit_env, org, "admin1", UserRole.ADMIN)

        with pytest.raises(InvalidOperationError):
            await service.authorize_removal(inactive, admin)

    @pytest.mark.asyncio
    async def test_inactive_admin_removal_skips_guard(self, unit_env):
        """An inactive administrator holds no power, so removing them is allowed."""
        service = await unit_env.get(PermissionService)
        org = await seed_organization(unit_env)
        admin = await seed_user(unit_env, org, "admin1", UserRole.ADMIN)
        inactive = await seed_user(
            unit_env, org, "admin2", UserRole.ADMIN, UserStatus.INACTIVE
        )

        await service.authorize_removal(admin, inactive)


class TestAuthorizeStatusChange:
    """Tests for authorize_status_change."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("new_status", [UserStatus.INACTIVE, UserStatus.LOCKED])
    async def test_sole_active_admin_cannot_be_deactivated(self, unit_env, new_status):
        service = await unit_env.get(PermissionService)
        org = await seed_organization(unit_env)
        unpaid = await seed_user(
            unit_env, org, "unpaid1", UserRole.UNPAID_ADMIN, UserStatus.LOCKED
        )
        target = await seed_user(unit_env, org, "unpaid2", UserRole.UNPAID_ADMIN)

        with pytest.raises(InvalidOperationError):
            await service.authorize_status_change(unpaid, target, new_status)

    @pytest.mark.asyncio
    async def test_deactivating_one_of_two_admins(self, unit_env):
        service = await unit_env.get(PermissionService)
        org = await seed_organization(unit_env)
        admin = await seed_user(unit_env, org, "admin1", UserRole.ADMIN)
        unpaid = await seed_user(unit_env, org, "unpaid1", UserRole.UNPAID_ADMIN)

        assert await service.authorize_status_change(
            admin, unpaid, UserStatus.INACTIVE
        )

    @pytest.mark.asyncio
    async def test_same_status_is_noop(self, unit_env):
        service = await unit_env.get(PermissionService)
        org = await seed_organization(unit_env)
        admin = await seed_user(unit_env, org, "admin1", UserRole.ADMIN)
        member = await seed_user(unit_env, org, "member1")

        applies = await service.authorize_status_change(
            admin, member, UserStatus.ACTIVE
        )

        assert applies is False

    @pytest.mark.asyncio
    async def test_reactivation_never_guarded(self, unit_env):
        service = await unit_env.get(PermissionService)
        org = await seed_organization(unit_env)
        admin = await seed_user(unit_env, org, "admin1", UserRole.ADMIN)
        locked = await seed_user(
            unit_env, org, "admin2", UserRole.ADMIN, UserStatus.LOCKED
        )

        assert await service.authorize_status_change(admin, locked, UserStatus.ACTIVE)
