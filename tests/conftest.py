"""Test configuration and shared seed helpers."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

from dishka import AsyncContainer

from roster.domain.model import Invitation, Organization, User
from roster.domain.repository import (
    InvitationRepository,
    OrganizationRepository,
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
    UserStatus,
)

SEED_TIME = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)


async def seed_organization(env: AsyncContainer, name: str = "Acme") -> Organization:
    """Store an organization directly through the repository."""
    repository = await env.get(OrganizationRepository)
    return await repository.save(
        Organization(
            id=OrganizationId(uuid4()),
            name=name,
            created_at=SEED_TIME,
            updated_at=SEED_TIME,
        )
    )


async def seed_user(
    env: AsyncContainer,
    organization: Organization,
    username: str,
    role: UserRole = UserRole.MEMBER,
    status: UserStatus = UserStatus.ACTIVE,
    email: str | None = None,
) -> User:
    """Store a user directly, skipping password hashing."""
    repository = await env.get(UserRepository)
    return await repository.save(
        User(
            id=UserId(uuid4()),
            username=Username(username),
            email=EmailAddress(email or f"{username}@example.com"),
            first_name=username.capitalize(),
            last_name="Tester",
            password_hash="not-a-real-hash",
            role=role,
            status=status,
            organization_id=organization.id,
            created_at=SEED_TIME,
            updated_at=SEED_TIME,
        )
    )


async def seed_invitation(
    env: AsyncContainer,
    inviter: User,
    email: str,
    expires_in: timedelta = timedelta(hours=24),
    status: InvitationStatus = InvitationStatus.PENDING,
    role: UserRole = UserRole.MEMBER,
) -> Invitation:
    """Store an invitation directly; expiry is relative to SEED_TIME."""
    repository = await env.get(InvitationRepository)
    return await repository.save(
        Invitation(
            id=InvitationId(uuid4()),
            email=EmailAddress(email),
            first_name="Invited",
            last_name="Person",
            role=role,
            organization_id=inviter.organization_id,
            invited_by_id=inviter.id,
            token=InvitationToken(uuid4().hex),
            status=status,
            expires_at=SEED_TIME + expires_in,
            created_at=SEED_TIME,
        )
    )
