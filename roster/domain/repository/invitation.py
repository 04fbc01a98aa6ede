"""Invitation repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime

from roster.domain.model import Invitation
from roster.domain.value import (
    EmailAddress,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    OrganizationId,
    UserId,
)


class InvitationRepository(ABC):
    """Repository for Invitation entity.

    Status transitions go through ``transition_status`` only, so that two
    writers racing on the same invitation can never both succeed.
    """

    @abstractmethod
    async def find_by_id(self, invitation_id: InvitationId) -> Invitation | None:
        """Find an invitation by ID.

        Args:
            invitation_id: The invitation's unique identifier

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_token(self, token: InvitationToken) -> Invitation | None:
        """Find an invitation by token.

        Used when the invitee opens the acceptance link.

        Args:
            token: The invitation token

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_pending_by_email(
        self, email: EmailAddress, organization_id: OrganizationId
    ) -> Invitation | None:
        """Find the PENDING invitation for an email in an organization.

        The returned invitation may already be past its deadline; callers
        decide validity against their clock.

        Args:
            email: Invitee email
            organization_id: Organization the invitation belongs to

        Returns:
            The pending invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_organization(
        self,
        organization_id: OrganizationId,
        status: InvitationStatus | None = None,
    ) -> list[Invitation]:
        """List invitations of an organization, newest first.

        Args:
            organization_id: Organization to list
            status: Optional status filter

        Returns:
            List of invitations
        """
        pass

    @abstractmethod
    async def find_expired_pending(self, now: datetime) -> list[Invitation]:
        """Find PENDING invitations whose deadline is strictly before ``now``."""
        pass

    @abstractmethod
    async def save(self, invitation: Invitation) -> Invitation:
        """Insert a new invitation.

        Args:
            invitation: The invitation to save

        Returns:
            The saved invitation

        Raises:
            ConflictError: If the token is taken or a pending invitation
                already exists for the same email and organization
        """
        pass

    @abstractmethod
    async def detach_inviter(self, user_id: UserId) -> int:
        """Clear the inviter reference on every invitation sent by a user.

        Invitations outlive the user who sent them; status and history
        are left untouched.

        Returns:
            Number of invitations updated
        """
        pass

    @abstractmethod
    async def transition_status(
        self,
        invitation_id: InvitationId,
        expected: InvitationStatus,
        new: InvitationStatus,
        accepted_at: datetime | None = None,
    ) -> Invitation | None:
        """Move an invitation to ``new`` only if it is still in ``expected``.

        Args:
            invitation_id: Invitation to update
            expected: Status the caller observed
            new: Target status
            accepted_at: Acceptance time, set together with ACCEPTED

        Returns:
            The updated invitation, or None if the status had already changed
            (or the invitation does not exist)
        """
        pass
