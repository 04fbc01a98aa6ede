"""Role/permission engine.

All manage-ability and role-assignment decisions derive from ``can_manage``
plus the admin-invariant guard. The ``authorize_*`` methods only decide;
the caller applies the mutation after they return.
"""

import logfire

from roster.domain.error import InvalidOperationError, UnauthorizedError
from roster.domain.model import User
from roster.domain.repository import UserRepository
from roster.domain.value import UserRole, UserStatus

from .admin_guard import can_remove_admin_status
from .base import Service


def can_manage(actor: User, target: User) -> bool:
    """Whether ``actor`` may change or remove ``target``.

    - Nobody manages themselves
    - ADMIN manages any other user
    - UNPAID_ADMIN manages anyone who is not an ADMIN
    - MEMBER manages no one
    """
    if actor.id == target.id:
        return False
    if actor.role is UserRole.ADMIN:
        return True
    if actor.role is UserRole.UNPAID_ADMIN:
        return target.role is not UserRole.ADMIN
    return False


class PermissionService(Service):
    """Domain service authorizing role, status and membership changes."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize permission service.

        Args:
            user_repository: User repository, used for administrator counts
        """
        self.user_repository = user_repository

    def _check_manageable(self, actor: User, target: User, action: str) -> None:
        if not can_manage(actor, target):
            logfire.warn(
                "Actor cannot manage target",
                action=action,
                actor_id=str(actor.id),
                actor_role=actor.role.value,
                target_id=str(target.id),
                target_role=target.role.value,
            )
            if actor.id == target.id:
                raise UnauthorizedError("Users cannot manage themselves")
            raise UnauthorizedError(
                f"A {actor.role.value} cannot manage a {target.role.value}"
            )
        if actor.organization_id != target.organization_id:
            logfire.warn(
                "Cross-organization management rejected",
                action=action,
                actor_id=str(actor.id),
                target_id=str(target.id),
            )
            raise UnauthorizedError("Cannot manage users of another organization")

    async def _check_admin_invariant(self, target: User, action: str) -> None:
        """Reject if ``target`` is the organization's last effective administrator."""
        admin_count = await self.user_repository.count_admins(target.organization_id)
        if not can_remove_admin_status(admin_count):
            logfire.warn(
                "Last administrator protected",
                action=action,
                target_id=str(target.id),
                organization_id=str(target.organization_id),
                admin_count=admin_count,
            )
            raise InvalidOperationError(
                "Cannot remove the last administrator of the organization"
            )

    async def authorize_role_change(
        self, actor: User, target: User, new_role: UserRole
    ) -> bool:
        """Authorize giving ``target`` the role ``new_role``.

        Args:
            actor: User performing the change
            target: User whose role changes
            new_role: Requested role

        Returns:
            False if the change is a no-op (target already holds the role),
            True if the caller should apply it

        Raises:
            UnauthorizedError: If the actor may not manage the target, the
                users are in different organizations, or an UNPAID_ADMIN
                tries to grant ADMIN
            InvalidOperationError: If the target is the last administrator
                and would be demoted
        """
        with logfire.span(
            "permission_service.authorize_role_change",
            actor_id=str(actor.id),
            target_id=str(target.id),
            new_role=new_role.value,
        ):
            self._check_manageable(actor, target, "role_change")

            if new_role is target.role:
                return False

            if (
                target.is_administrator
                and target.is_active
                and not new_role.is_administrator
            ):
                await self._check_admin_invariant(target, "role_change")

            if actor.role is UserRole.UNPAID_ADMIN and new_role is UserRole.ADMIN:
                logfire.warn(
                    "Unpaid admin cannot grant admin",
                    actor_id=str(actor.id),
                    target_id=str(target.id),
                )
                raise UnauthorizedError(
                    "An unpaid_admin cannot promote users to admin"
                )

            return True

    async def authorize_removal(self, actor: User, target: User) -> None:
        """Authorize deleting ``target`` from its organization.

        Raises:
            UnauthorizedError: If the actor may not manage the target
            InvalidOperationError: If the target is the last administrator
        """
        with logfire.span(
            "permission_service.authorize_removal",
            actor_id=str(actor.id),
            target_id=str(target.id),
        ):
            self._check_manageable(actor, target, "removal")
            if target.is_administrator and target.is_active:
                await self._check_admin_invariant(target, "removal")

    async def authorize_status_change(
        self, actor: User, target: User, new_status: UserStatus
    ) -> bool:
        """Authorize moving ``target`` to ``new_status``.

        Any status other than ACTIVE takes administrative power away, so
        INACTIVE and LOCKED are guarded alike.

        Returns:
            False if the target already has the status, True otherwise

        Raises:
            UnauthorizedError: If the actor may not manage the target
            InvalidOperationError: If the target is the last administrator
                and would stop being active
        """
        with logfire.span(
            "permission_service.authorize_status_change",
            actor_id=str(actor.id),
            target_id=str(target.id),
            new_status=new_status.value,
        ):
            self._check_manageable(actor, target, "status_change")

            if new_status is target.status:
                return False

            if (
                target.is_administrator
                and target.is_active
                and new_status is not UserStatus.ACTIVE
            ):
                await self._check_admin_invariant(target, "status_change")

            return True
