"""In-memory unit-of-work for testing."""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from roster.domain.repository import TransactionManager

from .invitation import InMemoryInvitationRepository
from .organization import InMemoryOrganizationRepository
from .user import InMemoryUserRepository


class InMemoryTransactionManager(TransactionManager):
    """Serializes units of work and undoes the writes of a failed one.

    Units must not be nested: the lock is not reentrant.
    """

    def __init__(
        self,
        organization_repository: InMemoryOrganizationRepository,
        user_repository: InMemoryUserRepository,
        invitation_repository: InMemoryInvitationRepository,
    ) -> None:
        self._repositories = (
            organization_repository,
            user_repository,
            invitation_repository,
        )
        self._lock = asyncio.Lock()

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        async with self._lock:
            snapshots = [repository.snapshot() for repository in self._repositories]
            try:
                yield
            except BaseException:
                for repository, state in zip(self._repositories, snapshots):
                    repository.restore(state)
                raise

    async def commit(self) -> None:
        """Finished units are applied immediately; nothing to flush."""
