"""Invitation lifecycle domain service.

States: PENDING -> ACCEPTED | CANCELLED | EXPIRED. All three targets are
terminal. Every transition is a compare-and-set on the current status, so
an acceptance racing the expiry sweeper (or a cancellation) has exactly one
winner.
"""

import secrets
from datetime import timedelta
from uuid import uuid4

import logfire

from roster.config import Settings
from roster.domain.error import InvalidOperationError, NotFoundError, UnauthorizedError
from roster.domain.model import Invitation, Organization, User
from roster.domain.repository import (
    InvitationRepository,
    OrganizationRepository,
    TransactionManager,
    UserRepository,
)
from roster.domain.value import (
    EmailAddress,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    Username,
    UserRole,
)

from .base import Service
from .clock import Clock
from .notification import InvitationNotice, InvitationNotifier
from .user_service import UserService

# 32 random bytes, URL-safe base64 encoded
TOKEN_BYTES = 32


def generate_token() -> InvitationToken:
    """Generate a fresh unguessable invitation token."""
    return InvitationToken(secrets.token_urlsafe(TOKEN_BYTES))


class InvitationService(Service):
    """Domain service for invitation creation, acceptance and cancellation."""

    def __init__(
        self,
        invitation_repository: InvitationRepository,
        user_repository: UserRepository,
        organization_repository: OrganizationRepository,
        user_service: UserService,
        notifier: InvitationNotifier,
        transactions: TransactionManager,
        clock: Clock,
        settings: Settings,
    ) -> None:
        """Initialize invitation service.

        Args:
            invitation_repository: Invitation repository
            user_repository: User repository
            organization_repository: Organization repository
            user_service: User service, used to register accepted invitees
            notifier: Delivers invitation notices
            transactions: Unit-of-work boundary
            clock: Time source for deadlines
            settings: Application settings
        """
        self.invitation_repository = invitation_repository
        self.user_repository = user_repository
        self.organization_repository = organization_repository
        self.user_service = user_service
        self.notifier = notifier
        self.transactions = transactions
        self.clock = clock
        self.settings = settings

    @property
    def ttl(self) -> timedelta:
        return timedelta(hours=self.settings.invitations.expiration_hours)

    def is_valid(self, invitation: Invitation) -> bool:
        """Whether the invitation is PENDING and before its deadline right now."""
        return invitation.is_valid(self.clock.now())

    def acceptance_url(self, invitation: Invitation) -> str:
        """Link the invitee follows to accept."""
        return f"{self.settings.acceptance_base_url}{invitation.token.root}"

    async def invite(
        self,
        actor: User,
        email: EmailAddress,
        first_name: str,
        last_name: str,
        role: UserRole,
    ) -> Invitation:
        """Invite someone to join the actor's organization.

        Args:
            actor: Administrator sending the invitation
            email: Invitee email
            first_name: Invitee first name
            last_name: Invitee last name
            role: Role the invitee receives on acceptance

        Returns:
            The created PENDING invitation

        Raises:
            UnauthorizedError: If the actor is not an administrator, or an
                UNPAID_ADMIN invites an ADMIN
            InvalidOperationError: If the email already belongs to a member or
                a valid invitation for it is pending
            ConflictError: If a concurrent invitation for the same email won
            TransientError: If the invitation could not be committed; no
                notice is sent then
        """
        with logfire.span(
            "invitation_service.invite",
            actor_id=str(actor.id),
            organization_id=str(actor.organization_id),
            role=role.value,
        ):
            if not actor.is_administrator:
                logfire.warn(
                    "Non-administrator cannot invite", actor_id=str(actor.id)
                )
                raise UnauthorizedError("Only administrators can send invitations")
            if actor.role is UserRole.UNPAID_ADMIN and role is UserRole.ADMIN:
                logfire.warn(
                    "Unpaid admin cannot invite admin", actor_id=str(actor.id)
                )
                raise UnauthorizedError("An unpaid_admin cannot invite admin users")

            async with self.transactions.atomic():
                organization = await self.organization_repository.find_by_id(
                    actor.organization_id
                )
                if organization is None:
                    raise NotFoundError("Organization", str(actor.organization_id))

                if await self.user_repository.find_by_email_in_organization(
                    email, actor.organization_id
                ):
                    logfire.warn(
                        "Invitee already a member",
                        organization_id=str(actor.organization_id),
                    )
                    raise InvalidOperationError(
                        "A user with this email is already a member of the organization"
                    )

                now = self.clock.now()
                pending = await self.invitation_repository.find_pending_by_email(
                    email, actor.organization_id
                )
                if pending is not None:
                    if pending.is_valid(now):
                        logfire.warn(
                            "Invitation already pending",
                            invitation_id=str(pending.id),
                        )
                        raise InvalidOperationError(
                            "An invitation is already pending for this email"
                        )
                    # Past its deadline but not swept yet
                    await self.invitation_repository.transition_status(
                        pending.id, InvitationStatus.PENDING, InvitationStatus.EXPIRED
                    )
                    logfire.info(
                        "Stale invitation expired", invitation_id=str(pending.id)
                    )

                invitation = Invitation(
                    id=InvitationId(uuid4()),
                    email=email,
                    first_name=first_name,
                    last_name=last_name,
                    role=role,
                    organization_id=actor.organization_id,
                    invited_by_id=actor.id,
                    token=generate_token(),
                    status=InvitationStatus.PENDING,
                    expires_at=now + self.ttl,
                    created_at=now,
                )
                saved = await self.invitation_repository.save(invitation)

            # The notice carries the token, so it must be stored first
            await self.transactions.commit()

            logfire.info(
                "Invitation created",
                invitation_id=str(saved.id),
                organization_id=str(saved.organization_id),
                expires_at=saved.expires_at.isoformat(),
            )

            await self._notify(saved, organization, actor)
            return saved

    async def _notify(
        self, invitation: Invitation, organization: Organization, inviter: User
    ) -> None:
        """Send the invitation notice. Failures are logged, never raised."""
        notice = InvitationNotice(
            recipient_email=invitation.email,
            recipient_first_name=invitation.first_name,
            recipient_last_name=invitation.last_name,
            organization_name=organization.name,
            inviter_full_name=inviter.full_name,
            role=invitation.role,
            acceptance_url=self.acceptance_url(invitation),
            expiration_hours=self.settings.invitations.expiration_hours,
        )
        try:
            await self.notifier.send_invitation(notice)
        except Exception as e:
            logfire.error(
                "Invitation notification failed",
                invitation_id=str(invitation.id),
                error=str(e),
                error_type=type(e).__name__,
            )
            return
        logfire.info("Invitation notification sent", invitation_id=str(invitation.id))

    async def get_pending_invitations(self, actor: User) -> list[Invitation]:
        """List the valid invitations of the actor's organization.

        Raises:
            UnauthorizedError: If the actor is not an administrator
        """
        with logfire.span(
            "invitation_service.get_pending_invitations",
            actor_id=str(actor.id),
            organization_id=str(actor.organization_id),
        ):
            if not actor.is_administrator:
                logfire.warn(
                    "Non-administrator cannot list invitations", actor_id=str(actor.id)
                )
                raise UnauthorizedError("Only administrators can list invitations")

            now = self.clock.now()
            invitations = await self.invitation_repository.find_by_organization(
                actor.organization_id, InvitationStatus.PENDING
            )
            valid = [
                invitation for invitation in invitations if invitation.is_valid(now)
            ]
            logfire.info(
                "Pending invitations listed",
                organization_id=str(actor.organization_id),
                count=len(valid),
            )
            return valid

    async def cancel(self, invitation_id: InvitationId, actor: User) -> Invitation:
        """Cancel a pending invitation.

        The inviter or any ADMIN of the same organization may cancel.

        Returns:
            The cancelled invitation

        Raises:
            NotFoundError: If the invitation does not exist
            UnauthorizedError: If the actor may not cancel it
            InvalidOperationError: If the invitation is no longer PENDING
        """
        with logfire.span(
            "invitation_service.cancel",
            invitation_id=str(invitation_id),
            actor_id=str(actor.id),
        ):
            async with self.transactions.atomic():
                invitation = await self.invitation_repository.find_by_id(invitation_id)
                if invitation is None:
                    logfire.warn(
                        "Invitation not found", invitation_id=str(invitation_id)
                    )
                    raise NotFoundError("Invitation", str(invitation_id))

                is_inviter = actor.id == invitation.invited_by_id
                if not is_inviter and actor.role is not UserRole.ADMIN:
                    logfire.warn(
                        "Actor cannot cancel invitation",
                        invitation_id=str(invitation_id),
                        actor_id=str(actor.id),
                    )
                    raise UnauthorizedError(
                        "Only the inviter or an admin can cancel an invitation"
                    )
                if invitation.organization_id != actor.organization_id:
                    logfire.warn(
                        "Cross-organization cancel rejected",
                        invitation_id=str(invitation_id),
                        actor_id=str(actor.id),
                    )
                    raise UnauthorizedError(
                        "Cannot cancel invitations of another organization"
                    )
                if invitation.status is not InvitationStatus.PENDING:
                    raise InvalidOperationError(
                        f"Invitation is already {invitation.status.value}"
                    )

                cancelled = await self.invitation_repository.transition_status(
                    invitation.id, InvitationStatus.PENDING, InvitationStatus.CANCELLED
                )
                if cancelled is None:
                    logfire.warn(
                        "Invitation changed concurrently",
                        invitation_id=str(invitation_id),
                    )
                    raise InvalidOperationError("Invitation is no longer pending")

            logfire.info("Invitation cancelled", invitation_id=str(invitation_id))
            return cancelled

    async def get_by_token(self, token: InvitationToken) -> Invitation:
        """Look up an invitation by its token.

        Raises:
            NotFoundError: If no invitation has this token
        """
        with logfire.span("invitation_service.get_by_token", token=token.redacted):
            invitation = await self.invitation_repository.find_by_token(token)
            if invitation is None:
                logfire.warn("Invitation not found", token=token.redacted)
                raise NotFoundError("Invitation", token.redacted)
            logfire.info(
                "Invitation found",
                invitation_id=str(invitation.id),
                status=invitation.status.value,
            )
            return invitation

    async def accept(
        self, token: InvitationToken, username: Username, password: str
    ) -> User:
        """Accept an invitation and create the invitee's account.

        The new user and the ACCEPTED status are written in one unit of work.

        Args:
            token: Invitation token from the acceptance link
            username: Login name chosen by the invitee
            password: Plain-text password chosen by the invitee

        Returns:
            The newly created ACTIVE user

        Raises:
            NotFoundError: If no invitation has this token
            InvalidOperationError: If the invitation is not valid, lost a race
                with another transition, or the account cannot be registered
        """
        with logfire.span("invitation_service.accept", token=token.redacted):
            async with self.transactions.atomic():
                invitation = await self.invitation_repository.find_by_token(token)
                if invitation is None:
                    logfire.warn("Invitation not found", token=token.redacted)
                    raise NotFoundError("Invitation", token.redacted)

                now = self.clock.now()
                if not invitation.is_valid(now):
                    logfire.warn(
                        "Invalid invitation presented",
                        invitation_id=str(invitation.id),
                        status=invitation.status.value,
                    )
                    raise InvalidOperationError("Invitation is invalid or expired")

                accepted = await self.invitation_repository.transition_status(
                    invitation.id,
                    InvitationStatus.PENDING,
                    InvitationStatus.ACCEPTED,
                    accepted_at=now,
                )
                if accepted is None:
                    logfire.warn(
                        "Invitation changed concurrently",
                        invitation_id=str(invitation.id),
                    )
                    raise InvalidOperationError("Invitation is no longer pending")

                user = await self.user_service.register(
                    username=username,
                    email=invitation.email,
                    first_name=invitation.first_name,
                    last_name=invitation.last_name,
                    password=password,
                    role=invitation.role,
                    organization_id=invitation.organization_id,
                )

            logfire.info(
                "Invitation accepted",
                invitation_id=str(invitation.id),
                user_id=str(user.id),
            )
            return user
