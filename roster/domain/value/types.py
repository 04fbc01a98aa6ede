"""Domain value objects for membership management.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from roster.domain.value.common import RootValueObject

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_.-]{3,50}$")


class UserRole(Enum):
    """Role a user holds within their organization.

    Deliberately not a ``str`` subclass: a role never compares equal to a
    status or to a bare string.
    """

    ADMIN = "admin"
    UNPAID_ADMIN = "unpaid_admin"
    MEMBER = "member"

    @property
    def is_administrator(self) -> bool:
        """ADMIN and UNPAID_ADMIN both count toward the admin invariant."""
        return self in (UserRole.ADMIN, UserRole.UNPAID_ADMIN)


class UserStatus(Enum):
    """Account status of a user."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    LOCKED = "locked"


class InvitationStatus(Enum):
    """Lifecycle state of an invitation.

    PENDING is the only non-terminal state.
    """

    PENDING = "pending"
    ACCEPTED = "accepted"
    CANCELLED = "cancelled"
    EXPIRED = "expired"


class InvitationToken(RootValueObject[str]):
    """URL-safe invitation token, the sole acceptance credential."""

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Validate token is not empty."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Token must be 1-255 characters")
        return v

    @property
    def redacted(self) -> str:
        """Short prefix safe to put in logs."""
        return self.root[:8] + "..."


class EmailAddress(RootValueObject[str]):
    """Email address, normalized to lowercase."""

    @field_validator("root")
    @classmethod
    def validate_email_format(cls, v: str) -> str:
        """Validate basic address shape and normalize case."""
        v = v.strip().lower()
        if len(v) > 255 or not _EMAIL_PATTERN.match(v):
            raise ValueError("Invalid email address")
        return v


class Username(RootValueObject[str]):
    """Login name, unique across all organizations.

    3-50 characters: letters, digits, underscore, dot or hyphen.
    """

    @field_validator("root")
    @classmethod
    def validate_username_format(cls, v: str) -> str:
        """Validate username format."""
        if not _USERNAME_PATTERN.match(v):
            raise ValueError(
                "Username must be 3-50 characters of letters, digits, '_', '.' or '-'"
            )
        return v
