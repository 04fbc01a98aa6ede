"""Unit tests for the HTTP invitation notifier."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from roster.adapter.error import NotificationError
from roster.adapter.notification import (
    HttpInvitationNotifier,
    render_invitation_message,
)
from roster.config import NotificationSettings
from roster.domain.service import InvitationNotice
from roster.domain.value import EmailAddress, UserRole


@pytest.fixture
def notice() -> InvitationNotice:
    return InvitationNotice(
        recipient_email=EmailAddress("jane@example.com"),
        recipient_first_name="Jane",
        recipient_last_name="Doe",
        organization_name="Acme",
        inviter_full_name="Alice Admin",
        role=UserRole.MEMBER,
        acceptance_url="http://localhost:3000/accept-invitation?token=abc",
        expiration_hours=24,
    )


@pytest.fixture
def settings() -> NotificationSettings:
    return NotificationSettings(
        api_url="https://mail.example.com/send",
        api_key="relay-key",
        sender_email="no-reply@acme.io",
        sender_name="Acme",
    )


class TestRenderInvitationMessage:
    """Tests for render_invitation_message."""

    def test_subject_and_body(self, notice):
        subject, body = render_invitation_message(notice)

        assert subject == "You've been invited to join Acme"
        assert body.startswith("Hello Jane Doe,\n\n")
        assert "join Acme as a member." in body
        assert "http://localhost:3000/accept-invitation?token=abc" in body
        assert "expire in 24 hours" in body
        assert body.endswith("Best regards,\nAlice Admin")


class TestHttpInvitationNotifier:
    """Tests for HttpInvitationNotifier."""

    @pytest.mark.asyncio
    async def test_posts_message_to_relay(self, notice, settings):
        # Arrange
        notifier = HttpInvitationNotifier(settings)
        mock_response = MagicMock()
        mock_response.status_code = 202

        with patch("httpx.AsyncClient") as mock_client:
            mock_post = AsyncMock(return_value=mock_response)
            mock_client.return_value.__aenter__.return_value.post = mock_post

            # Act
            await notifier.send_invitation(notice)

            # Assert
            mock_post.assert_awaited_once()
            args, kwargs = mock_post.call_args
            assert args[0] == "https://mail.example.com/send"
            assert kwargs["headers"]["Authorization"] == "Bearer relay-key"
            assert kwargs["json"]["to"] == [{"email": "jane@example.com"}]
            assert kwargs["json"]["from"]["email"] == "no-reply@acme.io"
            assert kwargs["json"]["subject"] == "You've been invited to join Acme"

    @pytest.mark.asyncio
    async def test_relay_rejection_raises(self, notice, settings):
        notifier = HttpInvitationNotifier(settings)
        mock_response = MagicMock()
        mock_response.status_code = 500
        mock_response.text = "boom"

        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                return_value=mock_response
            )

            with pytest.raises(NotificationError):
                await notifier.send_invitation(notice)

    @pytest.mark.asyncio
    async def test_transport_error_raises(self, notice, settings):
        notifier = HttpInvitationNotifier(settings)

        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                side_effect=httpx.ConnectError("refused")
            )

            with pytest.raises(NotificationError):
                await notifier.send_invitation(notice)

    @pytest.mark.asyncio
    async def test_unconfigured_relay_raises(self, notice):
        notifier = HttpInvitationNotifier(NotificationSettings())

        with pytest.raises(NotificationError):
            await notifier.send_invitation(notice)
