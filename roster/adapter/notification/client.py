"""Invitation notifier backed by an HTTP mail relay.

The relay accepts a JSON message (sender, recipient, subject, text body)
and delivers it as email.
"""

import httpx
import logfire

from roster.adapter.error import NotificationError
from roster.config import NotificationSettings
from roster.domain.service.notification import InvitationNotice, InvitationNotifier


def render_invitation_message(notice: InvitationNotice) -> tuple[str, str]:
    """Render the subject and plain-text body of an invitation email.

    Returns:
        Tuple of (subject, body)
    """
    subject = f"You've been invited to join {notice.organization_name}"
    body = (
        f"Hello {notice.recipient_first_name} {notice.recipient_last_name},\n\n"
        f"You have been invited to join {notice.organization_name} "
        f"as a {notice.role.value}.\n\n"
        f"Click the following link to accept the invitation:\n"
        f"{notice.acceptance_url}\n\n"
        f"This invitation will expire in {notice.expiration_hours} hours.\n\n"
        f"Best regards,\n{notice.inviter_full_name}"
    )
    return subject, body


class HttpInvitationNotifier(InvitationNotifier):
    """Sends invitation emails through the configured mail relay."""

    def __init__(self, settings: NotificationSettings) -> None:
        """Initialize notifier.

        Args:
            settings: Notification settings (relay URL, key, sender)
        """
        self.settings = settings

    async def send_invitation(self, notice: InvitationNotice) -> None:
        """Post the invitation email to the relay.

        Raises:
            NotificationError: If the relay is not configured, unreachable,
                or answers with a non-success status
        """
        if not self.settings.api_url:
            raise NotificationError("Notification relay is not configured")

        subject, body = render_invitation_message(notice)
        payload = {
            "from": {
                "email": self.settings.sender_email,
                "name": self.settings.sender_name,
            },
            "to": [{"email": notice.recipient_email.root}],
            "subject": subject,
            "text": body,
        }
        headers = {"Content-Type": "application/json"}
        if self.settings.api_key:
            headers["Authorization"] = f"Bearer {self.settings.api_key}"

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.settings.api_url,
                    json=payload,
                    headers=headers,
                    timeout=self.settings.timeout_seconds,
                )

                if response.status_code >= 300:
                    logfire.error(
                        "Mail relay rejected invitation email",
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise NotificationError(
                        f"Mail relay returned {response.status_code}"
                    )

        except httpx.HTTPError as e:
            logfire.error("Mail relay HTTP error", error=str(e))
            raise NotificationError(f"HTTP error sending invitation email: {e}")


class RecordingInvitationNotifier(InvitationNotifier):
    """Notifier for tests and local development.

    Keeps every notice instead of sending it. Set ``fail`` to make the next
    sends raise NotificationError.
    """

    def __init__(self) -> None:
        self.sent: list[InvitationNotice] = []
        self.fail = False

    async def send_invitation(self, notice: InvitationNotice) -> None:
        if self.fail:
            raise NotificationError("Recording notifier set to fail")
        self.sent.append(notice)
        logfire.info(
            "Invitation notice recorded",
            organization=notice.organization_name,
        )
