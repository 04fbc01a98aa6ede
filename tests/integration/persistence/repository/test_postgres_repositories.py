"""Integration tests for the PostgreSQL repositories.

Requires a migrated database at DATABASE__URL (``python scripts/run_migrations.py``).
Enabled by setting ROSTER_INTEGRATION=1.
"""

import os
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from roster.domain.error import ConflictError
from roster.domain.model import Invitation, Organization, User
from roster.domain.repository import (
    InvitationRepository,
    OrganizationRepository,
    TransactionManager,
    UserRepository,
)
from roster.domain.value import (
    EmailAddress,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    OrganizationId,
    UserId,
    Username,
    UserRole,
)
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.getenv("ROSTER_INTEGRATION"), reason="needs a migrated PostgreSQL"
)

# Integration test fixture - real persistence
integration_env = create_env_fixture(unmock={"persistence"})

NOW = datetime.now(timezone.utc)


async def _seed(env) -> tuple[Organization, User]:
    org_repo = await env.get(OrganizationRepository)
    user_repo = await env.get(UserRepository)
    suffix = uuid4().hex[:8]
    org = await org_repo.save(
        Organization(id=OrganizationId(uuid4()), name=f"Org {suffix}")
    )
    admin = await user_repo.save(
        User(
            id=UserId(uuid4()),
            username=Username(f"admin_{suffix}"),
            email=EmailAddress(f"admin_{suffix}@example.com"),
            first_name="Ada",
            last_name="Admin",
            password_hash="not-a-real-hash",
            role=UserRole.ADMIN,
            organization_id=org.id,
        )
    )
    return org, admin


def _invitation(admin: User, email: str) -> Invitation:
    return Invitation(
        id=InvitationId(uuid4()),
        email=EmailAddress(email),
        first_name="Jane",
        last_name="Doe",
        role=UserRole.MEMBER,
        organization_id=admin.organization_id,
        invited_by_id=admin.id,
        token=InvitationToken(uuid4().hex),
        expires_at=NOW + timedelta(hours=24),
        created_at=NOW,
    )


class TestPostgresRepositories:
    """Round trips against the real schema."""

    @pytest.mark.asyncio
    async def test_count_admins(self, integration_env):
        org, _ = await _seed(integration_env)
        user_repo = await integration_env.get(UserRepository)

        assert await user_repo.count_admins(org.id) == 1

    @pytest.mark.asyncio
    async def test_partial_unique_index_on_pending(self, integration_env):
        # Arrange
        _, admin = await _seed(integration_env)
        repo = await integration_env.get(InvitationRepository)
        transactions = await integration_env.get(TransactionManager)
        first = await repo.save(_invitation(admin, "dup@example.com"))

        # Act / Assert - second pending row for the same email is refused
        with pytest.raises(ConflictError):
            async with transactions.atomic():
                await repo.save(_invitation(admin, "dup@example.com"))

        # Once the first is terminal, a new pending one is accepted
        await repo.transition_status(
            first.id, InvitationStatus.PENDING, InvitationStatus.CANCELLED
        )
        second = await repo.save(_invitation(admin, "dup@example.com"))
        assert second.status is InvitationStatus.PENDING

    @pytest.mark.asyncio
    async def test_transition_status_compare_and_set(self, integration_env):
        _, admin = await _seed(integration_env)
        repo = await integration_env.get(InvitationRepository)
        invitation = await repo.save(_invitation(admin, "cas@example.com"))

        won = await repo.transition_status(
            invitation.id,
            InvitationStatus.PENDING,
            InvitationStatus.ACCEPTED,
            accepted_at=NOW,
        )
        lost = await repo.transition_status(
            invitation.id, InvitationStatus.PENDING, InvitationStatus.EXPIRED
        )

        assert won.status is InvitationStatus.ACCEPTED
        assert won.accepted_at is not None
        assert lost is None

    @pytest.mark.asyncio
    async def test_deleting_inviter_keeps_invitations(self, integration_env):
        # Arrange
        _, admin = await _seed(integration_env)
        repo = await integration_env.get(InvitationRepository)
        user_repo = await integration_env.get(UserRepository)
        invitation = await repo.save(_invitation(admin, "history@example.com"))
        await repo.transition_status(
            invitation.id,
            InvitationStatus.PENDING,
            InvitationStatus.ACCEPTED,
            accepted_at=NOW,
        )

        # Act - the foreign key alone must not cascade
        await user_repo.delete(admin.id)

        # Assert
        stored = await repo.find_by_id(invitation.id)
        assert stored is not None
        assert stored.status is InvitationStatus.ACCEPTED
        assert stored.invited_by_id is None

    @pytest.mark.asyncio
    async def test_detach_inviter(self, integration_env):
        _, admin = await _seed(integration_env)
        repo = await integration_env.get(InvitationRepository)
        invitation = await repo.save(_invitation(admin, "detach@example.com"))

        detached = await repo.detach_inviter(admin.id)

        assert detached == 1
        assert (await repo.find_by_id(invitation.id)).invited_by_id is None
