"""Domain model entities for membership management."""

from roster.domain.model.invitation import Invitation
from roster.domain.model.organization import Organization
from roster.domain.model.user import User

__all__ = [
    "Invitation",
    "Organization",
    "User",
]
