"""PostgreSQL unit-of-work."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession

from roster.domain.repository import TransactionManager
from roster.persistence.errors import translate_errors


class PostgresTransactionManager(TransactionManager):
    """Runs each unit of work in a SAVEPOINT of the request session.

    A unit that raises is rolled back to its savepoint, leaving earlier work
    of the same session intact. The outer transaction is committed by
    ``commit()`` or, at the latest, when the session scope ends.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        async with self.session.begin_nested():
            yield

    @translate_errors
    async def commit(self) -> None:
        await self.session.commit()
