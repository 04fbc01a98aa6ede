"""SQLAlchemy table definitions for the membership schema.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import ENUM, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

user_role_enum = ENUM(
    "admin", "unpaid_admin", "member", name="user_role", create_type=False
)
user_status_enum = ENUM(
    "active", "inactive", "locked", name="user_status", create_type=False
)
invitation_status_enum = ENUM(
    "pending",
    "accepted",
    "cancelled",
    "expired",
    name="invitation_status",
    create_type=False,
)

# ============================================================================
# ORGANIZATIONS TABLE
# ============================================================================
organizations_table = Table(
    "organizations",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(255), nullable=False),
    Column("description", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("name", name="uq_organizations_name"),
)

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(50), nullable=False),
    Column("email", String(255), nullable=False),  # Stored lowercased
    Column("first_name", String(100), nullable=False),
    Column("last_name", String(100), nullable=False),
    Column("password_hash", Text, nullable=False),
    Column("role", user_role_enum, nullable=False, server_default="member"),
    Column("status", user_status_enum, nullable=False, server_default="active"),
    Column(
        "organization_id",
        UUID,
        ForeignKey("organizations.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("last_login_at", TIMESTAMP(timezone=True), nullable=True),
    UniqueConstraint("username", name="uq_users_username"),
    UniqueConstraint("email", "organization_id", name="uq_users_email_organization"),
)

# Administrator counting filters on these three columns
Index(
    "idx_users_organization_role_status",
    users_table.c.organization_id,
    users_table.c.role,
    users_table.c.status,
)

# ============================================================================
# INVITATIONS TABLE
# ============================================================================
invitations_table = Table(
    "invitations",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("email", String(255), nullable=False),
    Column("first_name", String(100), nullable=False),
    Column("last_name", String(100), nullable=False),
    Column("role", user_role_enum, nullable=False),
    Column(
        "organization_id",
        UUID,
        ForeignKey("organizations.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "invited_by_id",
        UUID,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("token", String(255), nullable=False),
    Column(
        "status", invitation_status_enum, nullable=False, server_default="pending"
    ),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("accepted_at", TIMESTAMP(timezone=True), nullable=True),
    UniqueConstraint("token", name="uq_invitations_token"),
)

Index(
    "idx_invitations_organization_status",
    invitations_table.c.organization_id,
    invitations_table.c.status,
)
# Sweeper scan
Index(
    "idx_invitations_status_expires_at",
    invitations_table.c.status,
    invitations_table.c.expires_at,
)

# Partial unique index: only one pending invitation per email and organization
Index(
    "idx_invitations_unique_pending_email",
    invitations_table.c.email,
    invitations_table.c.organization_id,
    unique=True,
    postgresql_where=invitations_table.c.status == "pending",
)
