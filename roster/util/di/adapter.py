"""Adapter DI providers (non-mockable)."""

from dishka import Scope, provide

from roster.adapter.security import ScryptPasswordHasher
from roster.domain.service import PasswordHasher
from roster.util.di.base import ProviderBase


class ProdAdapterProvider(ProviderBase):
    """Adapters without external side effects, shared by prod and tests."""

    @provide(scope=Scope.APP)
    def get_password_hasher(self) -> PasswordHasher:
        """Provide the scrypt password hasher."""
        return ScryptPasswordHasher()
