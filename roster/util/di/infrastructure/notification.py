"""Notification infrastructure providers."""

from dishka import Scope, provide

from roster.adapter.notification import HttpInvitationNotifier
from roster.config import NotificationSettings
from roster.domain.service import InvitationNotifier
from roster.util.di.base import ProviderBase


class NotificationProvider(ProviderBase):
    """Notification component base."""

    __mock_component__ = "notification"


class ProdNotificationProvider(NotificationProvider):
    """Production notification provider posting to the mail relay."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_invitation_notifier(
        self, settings: NotificationSettings
    ) -> InvitationNotifier:
        """Provide HTTP invitation notifier."""
        return HttpInvitationNotifier(settings)
