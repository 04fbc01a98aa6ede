"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from roster.config import Settings
from roster.domain.repository import (
    InvitationRepository,
    OrganizationRepository,
    TransactionManager,
    UserRepository,
)
from roster.persistence.database import create_engine, create_session_factory
from roster.persistence.repository import (
    PostgresInvitationRepository,
    PostgresOrganizationRepository,
    PostgresUserRepository,
)
from roster.persistence.transaction import PostgresTransactionManager
from roster.util.di.base import ProviderBase
from roster.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is automatically committed at the end of the request
        if no exception occurred, or rolled back if an exception was raised.
        Domain operations that fail inside the request are already rolled
        back to their savepoint by the transaction manager.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.info("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_transaction_manager(self, session: AsyncSession) -> TransactionManager:
        """Provide savepoint-based transaction manager."""
        return PostgresTransactionManager(session)

    @provide(scope=Scope.REQUEST)
    def get_organization_repository(
        self, session: AsyncSession
    ) -> OrganizationRepository:
        """Provide Organization repository."""
        return PostgresOrganizationRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_invitation_repository(self, session: AsyncSession) -> InvitationRepository:
        """Provide Invitation repository."""
        return PostgresInvitationRepository(session)
