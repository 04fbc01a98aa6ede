"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from roster.config import NotificationSettings, SecuritySettings, Settings
from roster.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_security_settings(self, settings: Settings) -> SecuritySettings:
        """Provide credential rules."""
        return settings.security

    @provide(scope=Scope.APP)
    def provide_notification_settings(self, settings: Settings) -> NotificationSettings:
        """Provide notification settings."""
        return settings.notification
