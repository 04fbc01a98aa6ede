"""Mappers between domain models and table rows."""

from typing import Any, Dict
from uuid import UUID

from roster.domain.model import Invitation, Organization, User
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


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_organization(row: Dict[str, Any]) -> Organization:
    """Convert database row to Organization domain model."""
    return Organization(
        id=OrganizationId(_uuid(row["id"])),
        name=row["name"],
        description=row.get("description"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def organization_to_dict(organization: Organization) -> Dict[str, Any]:
    """Convert Organization domain model to a dictionary of column values."""
    return {
        "id": organization.id,
        "name": organization.name,
        "description": organization.description,
        "created_at": organization.created_at,
        "updated_at": organization.updated_at,
    }


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        email=EmailAddress(row["email"]),
        first_name=row["first_name"],
        last_name=row["last_name"],
        password_hash=row["password_hash"],
        role=UserRole(row["role"]),
        status=UserStatus(row["status"]),
        organization_id=OrganizationId(_uuid(row["organization_id"])),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        last_login_at=row.get("last_login_at"),
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to a dictionary of column values."""
    return {
        "id": user.id,
        "username": user.username.root,
        "email": user.email.root,
        "first_name": user.first_name,
        "last_name": user.last_name,
        "password_hash": user.password_hash,
        "role": user.role.value,
        "status": user.status.value,
        "organization_id": user.organization_id,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
        "last_login_at": user.last_login_at,
    }


def row_to_invitation(row: Dict[str, Any]) -> Invitation:
    """Convert database row to Invitation domain model."""
    return Invitation(
        id=InvitationId(_uuid(row["id"])),
        email=EmailAddress(row["email"]),
        first_name=row["first_name"],
        last_name=row["last_name"],
        role=UserRole(row["role"]),
        organization_id=OrganizationId(_uuid(row["organization_id"])),
        invited_by_id=(
            UserId(_uuid(row["invited_by_id"])) if row["invited_by_id"] else None
        ),
        token=InvitationToken(row["token"]),
        status=InvitationStatus(row["status"]),
        expires_at=row["expires_at"],
        created_at=row["created_at"],
        accepted_at=row.get("accepted_at"),
    )


def invitation_to_dict(invitation: Invitation) -> Dict[str, Any]:
    """Convert Invitation domain model to a dictionary of column values."""
    return {
        "id": invitation.id,
        "email": invitation.email.root,
        "first_name": invitation.first_name,
        "last_name": invitation.last_name,
        "role": invitation.role.value,
        "organization_id": invitation.organization_id,
        "invited_by_id": invitation.invited_by_id,
        "token": invitation.token.root,
        "status": invitation.status.value,
        "expires_at": invitation.expires_at,
        "created_at": invitation.created_at,
        "accepted_at": invitation.accepted_at,
    }
