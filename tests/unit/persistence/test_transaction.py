"""Unit tests for the PostgreSQL unit-of-work."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy import exc as sa_exc

from roster.domain.error import TransientError
from roster.persistence.transaction import PostgresTransactionManager


class TestPostgresTransactionManager:
    """Tests for PostgresTransactionManager."""

    @pytest.mark.asyncio
    async def test_commit_commits_session(self):
        session = MagicMock()
        session.commit = AsyncMock()
        transactions = PostgresTransactionManager(session)

        await transactions.commit()

        session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_failed_commit_is_transient(self):
        session = MagicMock()
        session.commit = AsyncMock(
            side_effect=sa_exc.OperationalError("COMMIT", {}, Exception("gone"))
        )
        transactions = PostgresTransactionManager(session)

        with pytest.raises(TransientError):
            await transactions.commit()
