"""Unit-of-work boundary."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class TransactionManager(ABC):
    """Scopes the reads and writes of one domain operation.

    Everything written inside ``atomic()`` is applied together or, when the
    block raises, not at all.
    """

    @abstractmethod
    def atomic(self) -> AbstractAsyncContextManager[None]:
        """Open a unit of work.

        Usage:
            async with transactions.atomic():
                ...
        """
        pass

    @abstractmethod
    async def commit(self) -> None:
        """Make every unit of work finished so far durable.

        Called before side effects outside storage, such as notifications,
        that must not refer to writes which could still be lost.

        Raises:
            TransientError: If storage could not commit
        """
        pass
