"""Invitation notification port.

The domain decides that an invitee must be told about an invitation and
what the message contains. Delivery belongs to an adapter.
"""

from abc import ABC, abstractmethod

from roster.domain.value import EmailAddress, UserRole
from roster.domain.value.common import ValueObject


class InvitationNotice(ValueObject):
    """Everything needed to tell an invitee about their invitation."""

    recipient_email: EmailAddress
    recipient_first_name: str
    recipient_last_name: str
    organization_name: str
    inviter_full_name: str
    role: UserRole
    acceptance_url: str
    expiration_hours: int


class InvitationNotifier(ABC):
    """Delivers invitation notices."""

    @abstractmethod
    async def send_invitation(self, notice: InvitationNotice) -> None:
        """Deliver a notice.

        Raises:
            NotificationError: If delivery failed
        """
        pass
