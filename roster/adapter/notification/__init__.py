"""Invitation notification delivery."""

from roster.adapter.notification.client import (
    HttpInvitationNotifier,
    RecordingInvitationNotifier,
    render_invitation_message,
)

__all__ = [
    "HttpInvitationNotifier",
    "RecordingInvitationNotifier",
    "render_invitation_message",
]
