"""Mock notification providers for testing."""

from dishka import Scope, provide

from roster.adapter.notification import RecordingInvitationNotifier
from roster.domain.service import InvitationNotifier
from roster.util.di.infrastructure.notification import NotificationProvider


class MockNotificationProvider(NotificationProvider):
    """Mock notification provider recording messages instead of sending them."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_recording_notifier(self) -> RecordingInvitationNotifier:
        return RecordingInvitationNotifier()

    @provide(scope=Scope.APP)
    def get_invitation_notifier(
        self, notifier: RecordingInvitationNotifier
    ) -> InvitationNotifier:
        """Provide recording invitation notifier."""
        return notifier
