"""User domain service."""

from uuid import uuid4

import logfire

from roster.config import SecuritySettings
from roster.domain.error import (
    ConflictError,
    InvalidOperationError,
    NotFoundError,
    UnauthorizedError,
)
from roster.domain.model import User
from roster.domain.repository import (
    InvitationRepository,
    OrganizationRepository,
    TransactionManager,
    UserRepository,
)
from roster.domain.value import (
    EmailAddress,
    OrganizationId,
    UserId,
    Username,
    UserRole,
    UserStatus,
)

from .base import Service
from .clock import Clock
from .credentials import PasswordHasher
from .permission_service import PermissionService


class UserService(Service):
    """Domain service for membership of users in their organization.

    Role, status and removal changes run under the organization lock, so the
    administrator count read by the permission engine still holds when the
    change is written.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        organization_repository: OrganizationRepository,
        invitation_repository: InvitationRepository,
        permission_service: PermissionService,
        password_hasher: PasswordHasher,
        transactions: TransactionManager,
        clock: Clock,
        security_settings: SecuritySettings,
    ) -> None:
        self.user_repository = user_repository
        self.organization_repository = organization_repository
        self.invitation_repository = invitation_repository
        self.permission_service = permission_service
        self.password_hasher = password_hasher
        self.transactions = transactions
        self.clock = clock
        self.security_settings = security_settings

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_actor(self, actor_id: UserId) -> User:
        """Resolve the acting user of a request.

        Raises:
            UnauthorizedError: If the user does not exist or is not ACTIVE
        """
        with logfire.span("user_service.get_actor", actor_id=str(actor_id)):
            actor = await self.user_repository.find_by_id(actor_id)
            if actor is None:
                logfire.warn("Unknown acting user", actor_id=str(actor_id))
                raise UnauthorizedError("Unknown acting user")
            if not actor.is_active:
                logfire.warn(
                    "Inactive acting user",
                    actor_id=str(actor_id),
                    status=actor.status.value,
                )
                raise UnauthorizedError(f"Acting user is {actor.status.value}")
            return actor

    async def get_user(self, actor: User, user_id: UserId) -> User:
        """Get a user of the actor's organization."""
        user = await self.get_by_id(user_id)
        if user.organization_id != actor.organization_id:
            logfire.warn(
                "Cross-organization lookup rejected",
                actor_id=str(actor.id),
                user_id=str(user_id),
            )
            raise UnauthorizedError("Cannot view users of another organization")
        return user

    async def list_users(self, actor: User) -> list[User]:
        """List all users of the actor's organization."""
        with logfire.span(
            "user_service.list_users",
            actor_id=str(actor.id),
            organization_id=str(actor.organization_id),
        ):
            users = await self.user_repository.find_by_organization(
                actor.organization_id
            )
            logfire.info(
                "Users listed",
                organization_id=str(actor.organization_id),
                count=len(users),
            )
            return users

    async def register(
        self,
        username: Username,
        email: EmailAddress,
        first_name: str,
        last_name: str,
        password: str,
        role: UserRole,
        organization_id: OrganizationId,
    ) -> User:
        """Create and persist a new ACTIVE user.

        Must run inside the caller's unit of work.

        Raises:
            InvalidOperationError: If the password is too short, the username
                is taken, or the email already belongs to a member
        """
        min_length = self.security_settings.min_password_length
        if len(password) < min_length:
            raise InvalidOperationError(
                f"Password must be at least {min_length} characters"
            )

        if await self.user_repository.find_by_username(username):
            logfire.warn("Username taken", username=username.root)
            raise InvalidOperationError(f"Username already taken: {username.root}")

        if await self.user_repository.find_by_email_in_organization(
            email, organization_id
        ):
            logfire.warn(
                "Email already a member",
                organization_id=str(organization_id),
            )
            raise InvalidOperationError(
                "A user with this email is already a member of the organization"
            )

        now = self.clock.now()
        user = User(
            id=UserId(uuid4()),
            username=username,
            email=email,
            first_name=first_name,
            last_name=last_name,
            password_hash=self.password_hasher.hash(password),
            role=role,
            status=UserStatus.ACTIVE,
            organization_id=organization_id,
            created_at=now,
            updated_at=now,
        )
        try:
            saved = await self.user_repository.save(user)
        except ConflictError as e:
            # Lost a race on username or email with a concurrent registration
            raise InvalidOperationError(e.reason) from e

        logfire.info(
            "User registered",
            user_id=str(saved.id),
            organization_id=str(organization_id),
            role=role.value,
        )
        return saved

    async def create_user(
        self,
        actor: User,
        username: Username,
        email: EmailAddress,
        first_name: str,
        last_name: str,
        password: str,
        role: UserRole,
    ) -> User:
        """Create a user directly in the actor's organization.

        Raises:
            UnauthorizedError: If the actor is not an administrator, or an
                UNPAID_ADMIN tries to create an ADMIN
            InvalidOperationError: If registration rules are violated
        """
        with logfire.span(
            "user_service.create_user",
            actor_id=str(actor.id),
            username=username.root,
            role=role.value,
        ):
            if not actor.is_administrator:
                logfire.warn(
                    "Non-administrator cannot create users", actor_id=str(actor.id)
                )
                raise UnauthorizedError("Only administrators can create users")
            if actor.role is UserRole.UNPAID_ADMIN and role is UserRole.ADMIN:
                logfire.warn(
                    "Unpaid admin cannot create admin", actor_id=str(actor.id)
                )
                raise UnauthorizedError("An unpaid_admin cannot create admin users")

            async with self.transactions.atomic():
                return await self.register(
                    username=username,
                    email=email,
                    first_name=first_name,
                    last_name=last_name,
                    password=password,
                    role=role,
                    organization_id=actor.organization_id,
                )

    async def _load_locked(self, actor: User, target_id: UserId) -> tuple[User, User]:
        """Lock the actor's organization and re-read both users."""
        await self.organization_repository.lock(actor.organization_id)
        current_actor = await self.user_repository.find_by_id(actor.id)
        if current_actor is None or not current_actor.is_active:
            raise UnauthorizedError("Acting user is no longer active")
        target = await self.user_repository.find_by_id(target_id)
        if target is None:
            logfire.warn("User not found", user_id=str(target_id))
            raise NotFoundError("User", str(target_id))
        return current_actor, target

    async def change_role(
        self, actor: User, target_id: UserId, new_role: UserRole
    ) -> User:
        """Change the role of a user.

        Args:
            actor: User performing the change
            target_id: User whose role changes
            new_role: Requested role

        Returns:
            The target user after the change

        Raises:
            NotFoundError: If the target does not exist
            UnauthorizedError: If the actor may not make this change
            InvalidOperationError: If the target is the last administrator
        """
        with logfire.span(
            "user_service.change_role",
            actor_id=str(actor.id),
            target_id=str(target_id),
            new_role=new_role.value,
        ):
            async with self.transactions.atomic():
                current_actor, target = await self._load_locked(actor, target_id)
                applies = await self.permission_service.authorize_role_change(
                    current_actor, target, new_role
                )
                if not applies:
                    return target

                updated = target.model_copy(
                    update={"role": new_role, "updated_at": self.clock.now()}
                )
                saved = await self.user_repository.save(updated)

            logfire.info(
                "User role changed",
                target_id=str(target_id),
                old_role=target.role.value,
                new_role=new_role.value,
            )
            return saved

    async def change_status(
        self, actor: User, target_id: UserId, new_status: UserStatus
    ) -> User:
        """Change the status of a user.

        Raises:
            NotFoundError: If the target does not exist
            UnauthorizedError: If the actor may not make this change
            InvalidOperationError: If the target is the last administrator
        """
        with logfire.span(
            "user_service.change_status",
            actor_id=str(actor.id),
            target_id=str(target_id),
            new_status=new_status.value,
        ):
            async with self.transactions.atomic():
                current_actor, target = await self._load_locked(actor, target_id)
                applies = await self.permission_service.authorize_status_change(
                    current_actor, target, new_status
                )
                if not applies:
                    return target

                updated = target.model_copy(
                    update={"status": new_status, "updated_at": self.clock.now()}
                )
                saved = await self.user_repository.save(updated)

            logfire.info(
                "User status changed",
                target_id=str(target_id),
                old_status=target.status.value,
                new_status=new_status.value,
            )
            return saved

    async def remove_user(self, actor: User, target_id: UserId) -> None:
        """Remove a user from the organization.

        Invitations the user sent are kept, with their inviter cleared.

        Raises:
            NotFoundError: If the target does not exist
            UnauthorizedError: If the actor may not remove the target
            InvalidOperationError: If the target is the last administrator
        """
        with logfire.span(
            "user_service.remove_user",
            actor_id=str(actor.id),
            target_id=str(target_id),
        ):
            async with self.transactions.atomic():
                current_actor, target = await self._load_locked(actor, target_id)
                await self.permission_service.authorize_removal(current_actor, target)
                detached = await self.invitation_repository.detach_inviter(target.id)
                await self.user_repository.delete(target.id)

            logfire.info(
                "User removed",
                target_id=str(target_id),
                organization_id=str(target.organization_id),
                invitations_detached=detached,
            )
